"""Identifier helpers for type and field names."""


def capitalize_first_letter(value: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return value[:1].upper() + value[1:]


def lower_case_first_letter(value: str) -> str:
    return value[:1].lower() + value[1:]


def _remove_suffix(suffix: str, value: str) -> str:
    if value.endswith(suffix):
        return value[: len(value) - len(suffix)]
    return value


def remove_id_suffix(value: str) -> str:
    """Strip a trailing ``Id``, then ``_id``, then ``_ID`` from a column name.

    Used to name relation fields after the foreign key column, e.g.
    ``author_id`` -> ``author``.
    """
    return _remove_suffix("_ID", _remove_suffix("_id", _remove_suffix("Id", value)))
