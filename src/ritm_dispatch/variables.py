"""
Catalog variables of a requested item.

Every lookup in the flow goes through ``get``: a variable that is absent or
holds the empty string resolves to the caller's default.
"""

from collections.abc import Iterator, Mapping
from typing import Optional


class RequestVariables(Mapping[str, str]):
    """Read-only variable name -> raw string value mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RequestVariables({self._values!r})"

    def get(self, name: str, default: str = "") -> str:  # type: ignore[override]
        value = self._values.get(name)
        return value if value else default

    def first(self, *names: str, default: str = "") -> str:
        """First non-empty value among ``names``."""
        for name in names:
            value = self._values.get(name)
            if value:
                return value
        return default

    def flag(self, name: str) -> bool:
        # Checkbox variables arrive as strings; only "true" is set.
        return self._values.get(name) == "true"
