"""Per-type capabilities used when rendering default values."""

from typing import Dict, Iterable, Optional

from .config import InferrerSettings


class TypeCapabilities:
    """Lookup of canonical type identifier -> whether default literals are quoted."""

    def __init__(
        self,
        quoted_types: Iterable[str] = (),
        overrides: Optional[Dict[str, bool]] = None,
    ):
        """Initialize from the quoted type names plus explicit per-type overrides."""
        self._requires_quoting: Dict[str, bool] = {name: True for name in quoted_types}
        if overrides:
            self._requires_quoting.update(overrides)

    @classmethod
    def from_settings(cls, settings: InferrerSettings) -> "TypeCapabilities":
        return cls(settings.QUOTED_DEFAULT_TYPES)

    def requires_quoting(self, type_identifier: Optional[str]) -> bool:
        """Return True if default values of this type render as string literals."""
        if type_identifier is None:
            return False
        return self._requires_quoting.get(type_identifier, False)
