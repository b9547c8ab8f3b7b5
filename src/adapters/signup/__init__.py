"""Signup adapters - Remote signup service implementations."""

from .http import HttpSignupClient, result_for_status

__all__ = ["HttpSignupClient", "result_for_status"]
