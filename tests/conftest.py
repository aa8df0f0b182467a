"""Pytest configuration for lgbm-harness tests."""

from __future__ import annotations

import numpy as np
import pytest

from lgbm_harness import Dataset, Field, MatBuf, Parameters, train_features, train_labels


@pytest.fixture
def quiet_params() -> Parameters:
    """Default parameters with LightGBM's console output silenced."""
    return Parameters(verbosity=-1)


@pytest.fixture
def smoke_matrix() -> MatBuf:
    """128 single-feature rows with values x % 3."""
    return train_features(128, 3)


@pytest.fixture
def smoke_labels() -> np.ndarray:
    """128 labels matching ``smoke_matrix``."""
    return train_labels(128, 3)


@pytest.fixture
def labelled_dataset(smoke_matrix: MatBuf, smoke_labels: np.ndarray, quiet_params: Parameters) -> Dataset:
    """Smoke dataset with the label field attached."""
    ds = Dataset.from_mat(smoke_matrix, None, quiet_params)
    ds.set_field(Field.LABEL, smoke_labels)
    return ds


@pytest.fixture
def regression_matrix() -> MatBuf:
    """Random 200 x 4 regression features."""
    rng = np.random.default_rng(42)
    return MatBuf.from_array(rng.standard_normal((200, 4)))


@pytest.fixture
def regression_labels(regression_matrix: MatBuf) -> np.ndarray:
    """Labels that depend on the first two features."""
    x = regression_matrix.data
    return (2.0 * x[:, 0] - x[:, 1]).astype(np.float32)
