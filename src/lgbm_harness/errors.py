"""Exception hierarchy for the LightGBM binding layer.

Every failure surfaced by this package derives from :class:`LGBMError`.
Failures reported by LightGBM itself are wrapped (``raise ... from exc``) so the
native message stays available on ``__cause__``.
"""

from __future__ import annotations

__all__: list[str] = [
    "BoosterError",
    "DatasetError",
    "FieldError",
    "LGBMError",
    "MatrixError",
    "ParameterError",
    "PredictionError",
]


class LGBMError(Exception):
    """Base class for all binding-layer errors."""


class ParameterError(LGBMError, ValueError):
    """Malformed parameter token or value."""


class MatrixError(LGBMError, ValueError):
    """Feature matrix has the wrong shape or element type."""


class DatasetError(LGBMError):
    """Dataset handle could not be constructed."""


class FieldError(LGBMError, ValueError):
    """Auxiliary field does not fit the dataset it is attached to."""


class BoosterError(LGBMError):
    """Booster could not be created or trained."""


class PredictionError(LGBMError):
    """Prediction on a feature matrix failed."""
