from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings

from .models import AUTO_INCREMENT


class InferrerSettings(BaseSettings):
    """Configuration settings for SDL inference and printing."""

    QUOTED_DEFAULT_TYPES: List[str] = ["String", "DateTime", "Json"]
    AUTO_INCREMENT_SENTINEL: str = AUTO_INCREMENT
    TYPE_COMMENT_MARKER: str = "//"
    FIELD_COMMENT_MARKER: str = "#"
    INFER_POPULATE_FIELDS: bool = False

    @model_validator(mode="after")
    def check_comment_markers(self) -> "InferrerSettings":
        """Reject blank comment markers, which would emit live text for suppressed blocks."""
        for name in ("TYPE_COMMENT_MARKER", "FIELD_COMMENT_MARKER"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")
        return self

    class Config:
        """Pydantic config."""

        case_sensitive = True
        env_prefix = "SDL_"
