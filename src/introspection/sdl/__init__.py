"""Schema document models and rendering outcomes."""

from .outcome import Rendered, RenderOutcome, Suppressed, SuppressionReason, comment_lines
from .types import SDL, GQLField, GQLType

__all__ = [
    "GQLField",
    "GQLType",
    "RenderOutcome",
    "Rendered",
    "SDL",
    "Suppressed",
    "SuppressionReason",
    "comment_lines",
]
