"""
Form theme - Read-only presentation settings for the view layer.

Colours and sizes used when rendering the signup form. The theme is
loaded once as part of Settings and passed to the view builder; no
module-level style state is shared.
"""

from pydantic import BaseModel, ConfigDict, Field


class FormTheme(BaseModel):
    """Presentation values for the signup form."""

    model_config = ConfigDict(frozen=True)

    wrapper_background: str = "#efeef5"
    input_background: str = "#f8f7fa"
    border_color: str = "rgba(0, 0, 0, 0.12)"
    invalid_border_color: str = "red"
    button_background: str = "#7135d2"
    button_text_color: str = "white"
    error_text_color: str = "grey"
    criteria_text_color: str = "gray"
    font_size_px: int = Field(default=14, gt=0)
    disabled_opacity: float = Field(default=0.5, ge=0.0, le=1.0)
