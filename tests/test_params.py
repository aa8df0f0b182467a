"""Tests for Parameters."""

from __future__ import annotations

import pytest

from lgbm_harness import Parameters, ParameterError


class TestConstruction:
    """Tests for building parameter sets."""

    def test_empty(self) -> None:
        """Test an empty set means defaults."""
        p = Parameters()
        assert len(p) == 0
        assert p.to_dict() == {}
        assert p.to_string() == ""

    def test_kwargs(self) -> None:
        """Test keyword construction keeps insertion order."""
        p = Parameters(objective="regression", num_leaves=10)
        assert list(p) == ["objective", "num_leaves"]
        assert p.get("num_leaves") == 10

    def test_from_dict(self) -> None:
        """Test construction from a mapping."""
        p = Parameters.from_dict({"learning_rate": 0.05})
        assert "learning_rate" in p
        assert p.get("missing", "fallback") == "fallback"

    def test_push_chains(self) -> None:
        """Test push returns the same set."""
        p = Parameters()
        assert p.push("a", 1).push("b", 2) is p
        assert p.to_dict() == {"a": 1, "b": 2}

    def test_push_empty_key(self) -> None:
        """Test empty keys are rejected."""
        with pytest.raises(ParameterError, match="must not be empty"):
            Parameters().push("  ", 1)

    def test_push_none_value(self) -> None:
        """Test None values are rejected."""
        with pytest.raises(ParameterError, match="has no value"):
            Parameters().push("objective", None)  # type: ignore[arg-type]


class TestParse:
    """Tests for the native key=value form."""

    def test_parse_coerces_types(self) -> None:
        """Test values are coerced to bool, int, float or str."""
        p = Parameters.parse("objective=regression num_leaves=10 learning_rate=0.05 force_col_wise=true")
        assert p.to_dict() == {
            "objective": "regression",
            "num_leaves": 10,
            "learning_rate": 0.05,
            "force_col_wise": True,
        }

    def test_parse_whitespace(self) -> None:
        """Test arbitrary whitespace separates tokens."""
        p = Parameters.parse("  a=1 \n\t b=x  ")
        assert p.to_dict() == {"a": 1, "b": "x"}

    def test_parse_missing_equals(self) -> None:
        """Test a token without '=' is rejected."""
        with pytest.raises(ParameterError, match="key=value"):
            Parameters.parse("objective regression")

    def test_parse_empty_key(self) -> None:
        """Test a token with an empty key is rejected."""
        with pytest.raises(ParameterError):
            Parameters.parse("=5")

    def test_parameter_error_is_value_error(self) -> None:
        """Test ParameterError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Parameters.parse("bad")


class TestRendering:
    """Tests for to_string and merging."""

    def test_to_string(self) -> None:
        """Test rendering of mixed value types."""
        p = Parameters(objective="binary", is_unbalance=False, metric=["auc", "binary_logloss"], num_leaves=31)
        assert p.to_string() == "objective=binary is_unbalance=false metric=auc,binary_logloss num_leaves=31"

    def test_to_string_parse_is_stable(self) -> None:
        """Test the demo parameter string survives parse and render."""
        text = "objective=regression metric=l2 num_leaves=10 learning_rate=0.05"
        assert Parameters.parse(text).to_string() == text

    def test_merged_overrides(self) -> None:
        """Test merged values override without mutating the original."""
        base = Parameters(num_leaves=10, verbosity=1)
        merged = base.merged({"verbosity": -1})
        assert merged.get("verbosity") == -1
        assert merged.get("num_leaves") == 10
        assert base.get("verbosity") == 1

    def test_merged_with_parameters(self) -> None:
        """Test merging two Parameters instances."""
        merged = Parameters(a=1).merged(Parameters(b=2))
        assert merged == Parameters(a=1, b=2)

    def test_to_dict_is_copy(self) -> None:
        """Test mutating to_dict output does not leak back."""
        p = Parameters(a=1)
        p.to_dict()["a"] = 2
        assert p.get("a") == 1
