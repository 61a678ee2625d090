"""Tests for `dagpath.config` focusing on behavior and correctness."""

import pytest

from dagpath.config import ANALYSIS_CONFIG, AnalysisConfig


def test_defaults() -> None:
    config = AnalysisConfig()
    assert config.self_check is True
    assert config.max_vertices is None


def test_global_config_is_default() -> None:
    assert ANALYSIS_CONFIG == AnalysisConfig()


def test_check_size_unbounded() -> None:
    """Without a limit any size is accepted."""
    AnalysisConfig().check_size(10**9)


def test_check_size_limit() -> None:
    """Sizes up to and including the limit pass; larger ones raise."""
    config = AnalysisConfig(max_vertices=5)
    config.check_size(5)
    with pytest.raises(ValueError, match="Graph has 6 vertices, limit is 5"):
        config.check_size(6)
