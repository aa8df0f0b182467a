"""Configuration models for smoke and demo runs.

This module defines all Pydantic models for run configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from lgbm_harness.params import Parameters

# Native parameter string used by the demo run
DEMO_PARAMS = (
    "objective=regression metric=l2 num_leaves=10 learning_rate=0.05 "
    "feature_fraction=1.0 bagging_fraction=1.0 min_data_in_leaf=1 "
    "min_sum_hessian_in_leaf=1.0 num_threads=0 verbosity=1"
)

ExtraParams = dict[str, str | int | float | bool]


class TrainingConfig(BaseModel):
    """Training hyperparameters.

    Every field defaults to ``None``, meaning "use LightGBM's default". Only the
    fields that are set end up in :meth:`to_parameters`.
    """

    model_config = ConfigDict(frozen=True)

    objective: str | None = None
    metric: str | None = None
    num_leaves: int | None = None
    learning_rate: float | None = None
    feature_fraction: float | None = None
    bagging_fraction: float | None = None
    min_data_in_leaf: int | None = None
    min_sum_hessian_in_leaf: float | None = None
    num_threads: int | None = None
    verbosity: int | None = None
    seed: int | None = None

    @field_validator("learning_rate")
    @classmethod
    def validate_learning_rate(cls, v: float | None) -> float | None:
        """Validate learning rate is positive."""
        if v is not None and v <= 0:
            raise ValueError("learning_rate must be positive")
        return v

    @field_validator("feature_fraction", "bagging_fraction")
    @classmethod
    def validate_fraction(cls, v: float | None) -> float | None:
        """Validate sampling fractions lie in (0, 1]."""
        if v is not None and not 0.0 < v <= 1.0:
            raise ValueError("fraction must be in (0, 1]")
        return v

    @field_validator("num_leaves")
    @classmethod
    def validate_num_leaves(cls, v: int | None) -> int | None:
        """Validate a tree can have at least two leaves."""
        if v is not None and v <= 1:
            raise ValueError("num_leaves must be greater than 1")
        return v

    @field_validator("min_data_in_leaf", "min_sum_hessian_in_leaf")
    @classmethod
    def validate_non_negative(cls, v: float | None) -> float | None:
        """Validate leaf constraints are non-negative."""
        if v is not None and v < 0:
            raise ValueError("leaf constraints must be non-negative")
        return v

    def to_parameters(self) -> Parameters:
        """Build a parameter set from the fields that are set."""
        return Parameters.from_dict(self.model_dump(exclude_none=True))


class SmokeConfig(BaseModel):
    """Configuration for the dataset -> label -> booster smoke run."""

    model_config = ConfigDict(frozen=True)

    n_rows: int = 128
    modulus: int = 3
    training: TrainingConfig = TrainingConfig()
    extra_params: ExtraParams = {}

    @field_validator("n_rows", "modulus")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate sizes are positive."""
        if v <= 0:
            raise ValueError("must be positive")
        return v

    def to_parameters(self) -> Parameters:
        """Combine training fields and extra parameters."""
        return self.training.to_parameters().merged(self.extra_params)


class DemoConfig(BaseModel):
    """Configuration for the train -> predict -> importance demo run."""

    model_config = ConfigDict(frozen=True)

    num_iterations: int = 10
    params: str = DEMO_PARAMS
    extra_params: ExtraParams = {}

    @field_validator("num_iterations")
    @classmethod
    def validate_num_iterations(cls, v: int) -> int:
        """Validate num_iterations is positive."""
        if v <= 0:
            raise ValueError("num_iterations must be positive")
        return v

    def to_parameters(self) -> Parameters:
        """Parse the native parameter string and apply extra parameters."""
        return Parameters.parse(self.params).merged(self.extra_params)
