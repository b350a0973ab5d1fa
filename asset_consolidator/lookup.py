"""
Safe access into schema-less JSON values.

Exported asset documents have no fixed schema: keys may be missing, nested
objects may be absent, and the same value may live under differently
capitalized keys depending on the asset type. These helpers never raise on
a missing key or a type mismatch; they report absence instead.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

Path = Union[str, Sequence[str]]


class _Missing:
    """Sentinel for a path that does not resolve to a value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _split(path: Path) -> Sequence[str]:
    if isinstance(path, str):
        return path.split(".")
    return path


def get_path(value: Any, path: Path) -> Any:
    """
    Walk a dotted path ("owner.name") or a key sequence through nested objects.

    Returns MISSING when a step is absent, when an intermediate value is not
    a JSON object, or when the final value is JSON null.
    """
    current = value
    for key in _split(path):
        if not isinstance(current, dict) or key not in current:
            return MISSING
        current = current[key]
    if current is None:
        return MISSING
    return current


def first_present(value: Any, *paths: Path, default: Any = "") -> Any:
    """
    Return the first path that resolves to a present value, else default.

    Only absence and null fall through; "" and false are present values.
    """
    for path in paths:
        found = get_path(value, path)
        if found is not MISSING:
            return found
    return default
