"""Tagged rendering outcomes.

Rendering steps decide whether their text is live or suppressed; a separate
formatting pass turns suppressed text into comments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


class SuppressionReason(str, Enum):
    """Why a rendered block was emitted as a comment."""

    MISSING_PRIMARY_KEY = "MISSING_PRIMARY_KEY"
    UNMAPPED_TYPE = "UNMAPPED_TYPE"


@dataclass(frozen=True)
class Rendered:
    """Text that is emitted as-is."""

    text: str


@dataclass(frozen=True)
class Suppressed:
    """Text that is emitted commented out."""

    text: str
    reason: SuppressionReason


RenderOutcome = Union[Rendered, Suppressed]


def comment_lines(text: str, marker: str) -> str:
    """Prefix every non-empty line of ``text`` with ``marker``."""
    return "\n".join(f"{marker} {line}" if line else "" for line in re.split(r"\r?\n", text))
