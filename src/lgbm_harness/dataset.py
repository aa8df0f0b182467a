"""Dataset handles and auxiliary fields.

Types:
    - Field: Named auxiliary data channel (label, weight, init score, group)
    - Dataset: Constructed LightGBM dataset built from a :class:`MatBuf`
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import lightgbm as lgb
import numpy as np
from lightgbm.basic import LightGBMError
from numpy.typing import ArrayLike, NDArray

from lgbm_harness.errors import DatasetError, FieldError
from lgbm_harness.matrix import MatBuf
from lgbm_harness.params import Parameters

__all__: list[str] = [
    "Dataset",
    "Field",
]

logger = logging.getLogger(__name__)


class Field(str, Enum):
    """Auxiliary data channel attached to a dataset.

    The value is the native field name understood by LightGBM.
    """

    LABEL = "label"
    WEIGHT = "weight"
    INIT_SCORE = "init_score"
    GROUP = "group"

    @property
    def dtype(self) -> type[np.generic]:
        """Element type LightGBM stores the field as."""
        return _FIELD_DTYPES[self]


_FIELD_DTYPES: dict[Field, type[np.generic]] = {
    Field.LABEL: np.float32,
    Field.WEIGHT: np.float32,
    Field.INIT_SCORE: np.float64,
    Field.GROUP: np.int32,
}


def _as_field(field: Field | str) -> Field:
    try:
        return Field(field)
    except ValueError as e:
        raise FieldError(f"unknown field: {field!r}") from e


def _to_field_array(field: Field, values: ArrayLike) -> NDArray[Any]:
    # read group sizes as float so fractions fail instead of truncating
    read_dtype = np.float64 if field == Field.GROUP else field.dtype
    try:
        arr = np.asarray(values, dtype=read_dtype)
    except (ValueError, TypeError) as e:
        raise FieldError(f"{field.value} values are not numeric") from e

    if arr.ndim != 1:
        raise FieldError(f"{field.value} must be a 1D vector, got {arr.ndim}D")

    if field == Field.GROUP:
        if not np.all(np.isfinite(arr) & (np.floor(arr) == arr)):
            raise FieldError("group sizes must be whole numbers")
        arr = arr.astype(np.int32)
    return np.ascontiguousarray(arr)


def _check_field(field: Field, arr: NDArray[Any], n_data: int) -> None:
    """Validate a converted field vector against the dataset row count."""
    if field in (Field.LABEL, Field.WEIGHT):
        if arr.shape[0] != n_data:
            raise FieldError(f"{field.value} length mismatch: expected {n_data} values, got {arr.shape[0]}")
    elif field == Field.INIT_SCORE:
        if arr.shape[0] == 0 or arr.shape[0] % n_data != 0:
            raise FieldError(
                f"init_score length must be a positive multiple of {n_data}, got {arr.shape[0]}"
            )
    elif field == Field.GROUP:
        if np.any(arr < 0):
            raise FieldError("group sizes must be non-negative")
        total = int(arr.sum())
        if total != n_data:
            raise FieldError(f"group sizes sum to {total}, expected {n_data}")

    if field != Field.GROUP and not np.all(np.isfinite(arr)):
        raise FieldError(f"{field.value} contains NaN or Inf values")


class Dataset:
    """Constructed LightGBM dataset plus the fields attached to it.

    Use :meth:`from_mat` rather than calling the constructor directly; the
    native handle is built eagerly so fields can be attached straight away.

    Example:
        >>> from lgbm_harness import Dataset, Field, MatBuf, Parameters
        >>> mat = MatBuf.from_rows([[float(x % 3)] for x in range(128)])
        >>> ds = Dataset.from_mat(mat, None, Parameters())
        >>> ds.set_field(Field.LABEL, [float(x % 3) for x in range(128)])
        >>> ds.n_data
        128
    """

    def __init__(self, native: lgb.Dataset, params: Parameters) -> None:
        """Wrap an already constructed ``lightgbm.Dataset``."""
        self._native = native
        self._params = params
        self._fields: dict[Field, NDArray[Any]] = {}

    @classmethod
    def from_mat(
        cls,
        mat: MatBuf,
        reference: Dataset | None = None,
        params: Parameters | None = None,
    ) -> Dataset:
        """Build a dataset from a row-major matrix.

        Args:
            mat: Feature matrix, one row per sample.
            reference: Dataset whose bin boundaries should be reused
                (typically the training set when building a validation set).
            params: Dataset parameters. ``None`` means LightGBM defaults.

        Raises:
            DatasetError: If the matrix is empty, contains infinities, or
                LightGBM rejects it.
        """
        params = params if params is not None else Parameters()

        if mat.is_empty:
            raise DatasetError(f"cannot build a dataset from an empty matrix {mat.shape}")
        if np.isinf(mat.data).any():
            raise DatasetError("feature matrix contains Inf values")

        try:
            native = lgb.Dataset(
                mat.data,
                reference=reference.native if reference is not None else None,
                params=params.to_dict(),
                free_raw_data=False,
            ).construct()
        except (LightGBMError, ValueError, TypeError) as e:
            raise DatasetError(f"dataset construction failed: {e}") from e

        logger.debug("Constructed dataset with %d rows and %d features", mat.n_rows, mat.n_cols)
        return cls(native, params)

    @property
    def native(self) -> lgb.Dataset:
        """Underlying ``lightgbm.Dataset``."""
        return self._native

    @property
    def params(self) -> Parameters:
        return self._params

    @property
    def n_data(self) -> int:
        """Number of rows."""
        return int(self._native.num_data())

    @property
    def n_feature(self) -> int:
        """Number of feature columns."""
        return int(self._native.num_feature())

    def set_field(self, field: Field | str, values: ArrayLike) -> None:
        """Attach an auxiliary field to the dataset.

        Args:
            field: Field to set, as a :class:`Field` or its native name.
            values: 1D vector; converted to the field's dtype.

        Raises:
            FieldError: If the vector does not fit the dataset (wrong length,
                non-finite values, bad group sizes) or LightGBM rejects it.
        """
        field = _as_field(field)
        arr = _to_field_array(field, values)
        _check_field(field, arr, self.n_data)

        try:
            if field == Field.LABEL:
                self._native.set_label(arr)
            elif field == Field.WEIGHT:
                self._native.set_weight(arr)
            elif field == Field.INIT_SCORE:
                self._native.set_init_score(arr)
            else:
                self._native.set_group(arr)
        except (LightGBMError, ValueError, TypeError) as e:
            raise FieldError(f"setting {field.value} failed: {e}") from e

        self._fields[field] = arr
        logger.debug("Attached field %s with %d values", field.value, arr.shape[0])

    def get_field(self, field: Field | str) -> NDArray[Any] | None:
        """Return the vector attached for ``field``, or ``None`` if unset."""
        return self._fields.get(_as_field(field))

    def has_field(self, field: Field | str) -> bool:
        return _as_field(field) in self._fields

    @property
    def has_label(self) -> bool:
        return Field.LABEL in self._fields

    @property
    def fields(self) -> list[Field]:
        """Fields attached so far, in attachment order."""
        return list(self._fields)

    def __repr__(self) -> str:
        """Return string representation."""
        fields = ", ".join(f.value for f in self._fields) or "none"
        return f"Dataset(n_data={self.n_data}, n_feature={self.n_feature}, fields=[{fields}])"
