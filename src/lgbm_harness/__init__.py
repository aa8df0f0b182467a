"""Typed binding layer over LightGBM, with a smoke-test harness.

Example:
    >>> from lgbm_harness import Booster, Dataset, Field, MatBuf, Parameters
    >>> p = Parameters()
    >>> train = Dataset.from_mat(MatBuf.from_rows([[float(x % 3)] for x in range(128)]), None, p)
    >>> train.set_field(Field.LABEL, [float(x % 3) for x in range(128)])
    >>> booster = Booster(train, p)  # doctest: +SKIP
"""

from lgbm_harness.booster import Booster, ImportanceType, PredictType
from lgbm_harness.config import DEMO_PARAMS, DemoConfig, SmokeConfig, TrainingConfig
from lgbm_harness.dataset import Dataset, Field
from lgbm_harness.errors import (
    BoosterError,
    DatasetError,
    FieldError,
    LGBMError,
    MatrixError,
    ParameterError,
    PredictionError,
)
from lgbm_harness.info import BuildInfo, get_build_info
from lgbm_harness.matrix import MatBuf
from lgbm_harness.params import Parameters
from lgbm_harness.smoke import (
    DemoResult,
    RowPrediction,
    SmokeResult,
    demo_features,
    demo_labels,
    run_demo,
    run_smoke,
    train_features,
    train_labels,
)

__all__ = [
    # Handles
    "Booster",
    "Dataset",
    "Field",
    "ImportanceType",
    "MatBuf",
    "Parameters",
    "PredictType",
    # Configuration
    "DEMO_PARAMS",
    "DemoConfig",
    "SmokeConfig",
    "TrainingConfig",
    # Errors
    "BoosterError",
    "DatasetError",
    "FieldError",
    "LGBMError",
    "MatrixError",
    "ParameterError",
    "PredictionError",
    # Runs
    "DemoResult",
    "RowPrediction",
    "SmokeResult",
    "demo_features",
    "demo_labels",
    "run_demo",
    "run_smoke",
    "train_features",
    "train_labels",
    # Build info
    "BuildInfo",
    "get_build_info",
]

__version__ = "0.1.0"
