"""Booster handles: create, train, predict, inspect."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import lightgbm as lgb
import numpy as np
from lightgbm.basic import LightGBMError
from numpy.typing import NDArray

from lgbm_harness.dataset import Dataset
from lgbm_harness.errors import BoosterError, PredictionError
from lgbm_harness.matrix import MatBuf
from lgbm_harness.params import Parameters

__all__: list[str] = [
    "Booster",
    "ImportanceType",
    "PredictType",
]

logger = logging.getLogger(__name__)


class PredictType(str, Enum):
    """What :meth:`Booster.predict_for_mat` returns per row."""

    NORMAL = "normal"
    RAW_SCORE = "raw_score"
    LEAF_INDEX = "leaf_index"
    CONTRIB = "contrib"


class ImportanceType(str, Enum):
    """How feature importance is counted."""

    SPLIT = "split"
    GAIN = "gain"


def _predict_kwargs(predict_type: PredictType) -> dict[str, bool]:
    match predict_type:
        case PredictType.RAW_SCORE:
            return {"raw_score": True}
        case PredictType.LEAF_INDEX:
            return {"pred_leaf": True}
        case PredictType.CONTRIB:
            return {"pred_contrib": True}
        case _:
            return {}


def _iteration_arg(num_iteration: int) -> int | None:
    # LightGBM treats None as "all iterations"
    return None if num_iteration <= 0 else num_iteration


class Booster:
    """Trainable ensemble bound to a training dataset.

    The booster keeps a reference to ``dataset`` for as long as it lives, so the
    dataset can be shared with other boosters without being copied.

    Args:
        dataset: Training dataset with a label attached.
        params: Booster parameters. ``None`` means LightGBM defaults.

    Raises:
        BoosterError: If the dataset has no label or LightGBM rejects the
            parameters or the dataset state.
    """

    def __init__(self, dataset: Dataset, params: Parameters | None = None) -> None:
        """Create the native booster."""
        params = params if params is not None else Parameters()

        if not dataset.has_label:
            raise BoosterError("dataset has no label; attach Field.LABEL before creating a booster")

        try:
            native = lgb.Booster(params=params.to_dict(), train_set=dataset.native)
        except (LightGBMError, ValueError, TypeError) as e:
            raise BoosterError(f"booster creation failed: {e}") from e

        self._native = native
        self._dataset = dataset
        self._params = params
        self._finished = False
        logger.debug("Created booster on %r", dataset)

    @property
    def native(self) -> lgb.Booster:
        """Underlying ``lightgbm.Booster``."""
        return self._native

    @property
    def dataset(self) -> Dataset:
        """Training dataset this booster shares."""
        return self._dataset

    @property
    def params(self) -> Parameters:
        return self._params

    @property
    def is_finished(self) -> bool:
        """Whether the last iteration found no leaf worth splitting."""
        return self._finished

    @property
    def current_iteration(self) -> int:
        return int(self._native.current_iteration())

    @property
    def num_feature(self) -> int:
        return int(self._native.num_feature())

    @property
    def num_trees(self) -> int:
        return int(self._native.num_trees())

    def update_one_iter(self) -> bool:
        """Run one boosting iteration.

        Returns:
            True if training cannot continue because no leaf meets the split
            requirements any more.
        """
        try:
            finished = bool(self._native.update())
        except (LightGBMError, ValueError) as e:
            raise BoosterError(f"iteration {self.current_iteration} failed: {e}") from e

        self._finished = finished
        return finished

    def train(self, num_iterations: int) -> int:
        """Run up to ``num_iterations`` boosting iterations.

        Stops as soon as :meth:`update_one_iter` reports the model is finished.

        Returns:
            Number of iterations that were attempted.
        """
        if num_iterations <= 0:
            raise ValueError("num_iterations must be positive")

        for i in range(num_iterations):
            if self.update_one_iter():
                logger.info("Stopped early at iteration %d: no more leaves meet the split requirements", i)
                return i + 1

        logger.info("Completed %d iterations", num_iterations)
        return num_iterations

    def predict_for_mat(
        self,
        mat: MatBuf,
        predict_type: PredictType = PredictType.NORMAL,
        start_iteration: int = 0,
        num_iteration: int = -1,
    ) -> NDArray[np.float64]:
        """Predict for every row of ``mat``.

        Args:
            mat: Feature matrix with ``num_feature`` columns.
            predict_type: Output kind (transformed, raw, leaf index, SHAP).
            start_iteration: First iteration to use.
            num_iteration: Number of iterations to use; ``-1`` means all.

        Raises:
            PredictionError: If the column count does not match or LightGBM
                fails.
        """
        if mat.n_cols != self.num_feature:
            raise PredictionError(f"matrix has {mat.n_cols} features, booster expects {self.num_feature}")

        try:
            out = self._native.predict(
                mat.data,
                start_iteration=start_iteration,
                num_iteration=_iteration_arg(num_iteration),
                **_predict_kwargs(PredictType(predict_type)),
            )
        except (LightGBMError, ValueError, TypeError) as e:
            raise PredictionError(f"prediction failed: {e}") from e

        return np.asarray(out, dtype=np.float64)

    def feature_importance(
        self,
        importance_type: ImportanceType = ImportanceType.SPLIT,
        num_iteration: int = -1,
    ) -> NDArray[np.float64]:
        """Per-feature importance over the first ``num_iteration`` iterations."""
        try:
            values = self._native.feature_importance(
                importance_type=ImportanceType(importance_type).value,
                iteration=_iteration_arg(num_iteration),
            )
        except LightGBMError as e:
            raise BoosterError(f"feature importance failed: {e}") from e
        return np.asarray(values, dtype=np.float64)

    def model_to_string(self, num_iteration: int = -1) -> str:
        """Serialise the model in LightGBM's text format."""
        try:
            return str(self._native.model_to_string(num_iteration=_iteration_arg(num_iteration)))
        except LightGBMError as e:
            raise BoosterError(f"model serialisation failed: {e}") from e

    def save_model(self, path: str | Path, num_iteration: int = -1) -> Path:
        """Write the model in LightGBM's text format and return the path.

        Raises:
            BoosterError: If the file cannot be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._native.save_model(str(path), num_iteration=_iteration_arg(num_iteration))
        except (LightGBMError, OSError) as e:
            raise BoosterError(f"saving model to {path} failed: {e}") from e
        logger.debug("Saved model to %s", path)
        return path

    def __repr__(self) -> str:
        return f"Booster(num_feature={self.num_feature}, current_iteration={self.current_iteration})"
