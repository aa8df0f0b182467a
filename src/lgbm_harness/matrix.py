"""Row-major feature matrix buffers.

LightGBM reads dense matrices as contiguous row-major ``float64`` (or
``float32``) buffers. :class:`MatBuf` normalises the inputs this package accepts
into that layout once, so datasets and predictions never copy again.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from lgbm_harness.errors import MatrixError

__all__: list[str] = [
    "MatBuf",
]


class MatBuf:
    """Dense row-major matrix of fixed-width ``float64`` rows.

    Args:
        data: 2D array of shape (n_rows, n_cols).

    Raises:
        MatrixError: If ``data`` is not 2D or not numeric.
    """

    __slots__ = ("_data",)

    def __init__(self, data: ArrayLike) -> None:
        """Wrap ``data`` as a C-contiguous float64 matrix."""
        try:
            arr = np.ascontiguousarray(data, dtype=np.float64)
        except (ValueError, TypeError) as e:
            raise MatrixError(f"cannot convert {type(data).__name__} to a numeric matrix") from e

        if arr.ndim != 2:
            raise MatrixError(f"matrix must be 2D, got {arr.ndim}D")

        self._data: NDArray[np.float64] = arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> MatBuf:
        """Build a matrix from a sequence of equally sized rows.

        An empty sequence gives a ``(0, 0)`` matrix.

        Raises:
            MatrixError: If the rows are not sequences or differ in width.
        """
        rows = list(rows)
        if not rows:
            return cls(np.empty((0, 0), dtype=np.float64))

        try:
            widths = [len(row) for row in rows]
        except TypeError as e:
            raise MatrixError("rows must be sequences") from e

        width = widths[0]
        for i, row_width in enumerate(widths):
            if row_width != width:
                raise MatrixError(f"row {i} has {row_width} values, expected {width}")

        return cls(rows)

    @classmethod
    def from_array(cls, array: ArrayLike) -> MatBuf:
        """Build a matrix from any 2D array-like."""
        return cls(array)

    @property
    def data(self) -> NDArray[np.float64]:
        """Underlying row-major buffer."""
        return self._data

    @property
    def n_rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    @property
    def is_empty(self) -> bool:
        """Whether the matrix has no rows or no columns."""
        return self._data.size == 0

    def __len__(self) -> int:
        return self.n_rows

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if copy is None:
            return np.asarray(self._data, dtype=dtype)
        return np.array(self._data, dtype=dtype, copy=copy)

    def __repr__(self) -> str:
        return f"MatBuf(n_rows={self.n_rows}, n_cols={self.n_cols})"
