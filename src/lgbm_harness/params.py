"""Parameter sets handed to LightGBM.

LightGBM accepts its configuration either as a mapping (Python API) or as a
whitespace-separated ``key=value`` string (C API). :class:`Parameters` holds the
mapping form and renders the string form on demand.

Example:
    >>> from lgbm_harness import Parameters
    >>> p = Parameters.parse("objective=regression num_leaves=10")
    >>> p.push("learning_rate", 0.05).to_string()
    'objective=regression num_leaves=10 learning_rate=0.05'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from lgbm_harness.errors import ParameterError

__all__: list[str] = [
    "Parameters",
]

ParamValue = str | int | float | bool | list[Any] | tuple[Any, ...]


def _coerce(raw: str) -> ParamValue:
    """Interpret a string token the way LightGBM's config parser would."""
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def _render(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render(v) for v in value)
    return str(value)


class Parameters:
    """Ordered key/value configuration for datasets and boosters.

    An empty set means "LightGBM defaults for everything".
    """

    def __init__(self, **kwargs: ParamValue) -> None:
        """Create a parameter set from keyword pairs."""
        self._values: dict[str, ParamValue] = {}
        for key, value in kwargs.items():
            self.push(key, value)

    @classmethod
    def from_dict(cls, values: Mapping[str, ParamValue]) -> Parameters:
        """Create a parameter set from a mapping."""
        params = cls()
        for key, value in values.items():
            params.push(key, value)
        return params

    @classmethod
    def parse(cls, text: str) -> Parameters:
        """Parse the native ``key=value key=value`` form.

        Raises:
            ParameterError: If a token has no ``=`` or an empty key.
        """
        params = cls()
        for token in text.split():
            key, sep, raw = token.partition("=")
            if not sep:
                raise ParameterError(f"parameter token {token!r} is not of the form key=value")
            params.push(key, _coerce(raw))
        return params

    def push(self, key: str, value: ParamValue) -> Parameters:
        """Set ``key`` to ``value`` and return ``self`` for chaining."""
        key = key.strip()
        if not key:
            raise ParameterError("parameter key must not be empty")
        if value is None:
            raise ParameterError(f"parameter {key!r} has no value")
        self._values[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def merged(self, other: Parameters | Mapping[str, ParamValue]) -> Parameters:
        """Return a new set with ``other`` overriding ``self``."""
        result = Parameters.from_dict(self._values)
        values = other.to_dict() if isinstance(other, Parameters) else other
        for key, value in values.items():
            result.push(key, value)
        return result

    def to_dict(self) -> dict[str, ParamValue]:
        """Return a copy of the mapping passed to LightGBM."""
        return dict(self._values)

    def to_string(self) -> str:
        """Render the native ``key=value`` string form."""
        return " ".join(f"{key}={_render(value)}" for key, value in self._values.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Parameters({self.to_string()!r})"
