"""Smoke and demo runs over the binding layer.

``run_smoke`` exercises the minimal sequence: parameters -> dataset from a
matrix -> label field -> booster. ``run_demo`` goes further: it trains for a
few iterations, predicts on the training rows and reports feature importance.
Both abort on the first error by letting :class:`LGBMError` propagate.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict

from lgbm_harness.booster import Booster, ImportanceType
from lgbm_harness.config import DEMO_PARAMS, DemoConfig, SmokeConfig
from lgbm_harness.dataset import Dataset, Field
from lgbm_harness.matrix import MatBuf

__all__: list[str] = [
    "DEMO_PARAMS",
    "DemoResult",
    "RowPrediction",
    "SmokeResult",
    "demo_features",
    "demo_labels",
    "run_demo",
    "run_smoke",
    "train_features",
    "train_labels",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Synthetic data
# =============================================================================


def train_features(n_rows: int = 128, modulus: int = 3) -> MatBuf:
    """Single-feature matrix with values ``x % modulus`` for ``x in 0..n_rows``."""
    return MatBuf.from_rows([[float(x % modulus)] for x in range(n_rows)])


def train_labels(n_rows: int = 128, modulus: int = 3) -> NDArray[np.float32]:
    """Labels ``x % modulus`` matching :func:`train_features`."""
    return (np.arange(n_rows) % modulus).astype(np.float32)


def demo_features() -> MatBuf:
    """Five rows of three features."""
    return MatBuf.from_rows(
        [
            [1.0, 0.5, 0.3],
            [2.0, 0.6, 0.4],
            [3.0, 0.7, 0.5],
            [4.0, 0.8, 0.6],
            [5.0, 0.9, 0.7],
        ]
    )


def demo_labels() -> NDArray[np.float32]:
    """Labels for :func:`demo_features`."""
    return np.array([0.1, 0.2, 0.3, 0.4, 0.5], dtype=np.float32)


# =============================================================================
# Results
# =============================================================================


class SmokeResult(BaseModel):
    """Outcome of a smoke run."""

    model_config = ConfigDict(frozen=True)

    n_rows: int
    n_features: int
    label_attached: bool
    booster_created: bool
    elapsed_s: float


class RowPrediction(BaseModel):
    """Actual label vs prediction for one training row."""

    model_config = ConfigDict(frozen=True)

    row: int
    actual: float
    predicted: float


class DemoResult(BaseModel):
    """Outcome of a demo run."""

    model_config = ConfigDict(frozen=True)

    iterations: int
    early_stopped: bool
    predictions: list[RowPrediction]
    feature_importance: list[float]
    train_time_s: float
    model_text: str | None = None
    model_path: Path | None = None


# =============================================================================
# Runs
# =============================================================================


def run_smoke(config: SmokeConfig | None = None) -> SmokeResult:
    """Build a dataset, attach labels and create a booster.

    Raises:
        LGBMError: On the first failing step.
    """
    config = config or SmokeConfig()
    params = config.to_parameters()

    start = time.perf_counter()
    train = Dataset.from_mat(train_features(config.n_rows, config.modulus), None, params)
    train.set_field(Field.LABEL, train_labels(config.n_rows, config.modulus))
    booster = Booster(train, params)
    elapsed = time.perf_counter() - start

    logger.info("Smoke run passed: %r", booster)
    return SmokeResult(
        n_rows=train.n_data,
        n_features=train.n_feature,
        label_attached=train.has_label,
        booster_created=booster.dataset is train,
        elapsed_s=elapsed,
    )


def run_demo(
    config: DemoConfig | None = None,
    *,
    keep_model: bool = False,
    save_path: Path | None = None,
) -> DemoResult:
    """Train on the demo matrix, predict on it and report importance.

    Args:
        config: Demo configuration.
        keep_model: Include the trained model text in the result.
        save_path: Write the trained model to this file.

    Raises:
        LGBMError: On the first failing step.
    """
    config = config or DemoConfig()
    params = config.to_parameters()
    features = demo_features()
    labels = demo_labels()

    train = Dataset.from_mat(features, None, params)
    train.set_field(Field.LABEL, labels)
    booster = Booster(train, params)

    start = time.perf_counter()
    iterations = booster.train(config.num_iterations)
    train_time = time.perf_counter() - start

    predicted = booster.predict_for_mat(features)
    importance = booster.feature_importance(ImportanceType.SPLIT)
    model_path = booster.save_model(save_path) if save_path is not None else None

    return DemoResult(
        iterations=iterations,
        early_stopped=booster.is_finished,
        predictions=[
            RowPrediction(row=i, actual=float(actual), predicted=float(pred))
            for i, (actual, pred) in enumerate(zip(labels, predicted, strict=True))
        ],
        feature_importance=importance.tolist(),
        train_time_s=train_time,
        model_text=booster.model_to_string() if keep_model else None,
        model_path=model_path,
    )
