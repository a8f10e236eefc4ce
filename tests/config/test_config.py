"""Tests for `depgraph.config`."""

from depgraph.algorithms.toposort import SortAlg
from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig


def test_defaults() -> None:
    config = AnalysisConfig()
    assert config.sort_alg == SortAlg.KAHN
    assert config.critical_path is True
    assert config.default_weight_type == "edge"
    assert ANALYSIS_CONFIG == config


def test_should_compute_critical_path_threshold() -> None:
    config = AnalysisConfig(critical_path_max_components=3)
    assert config.should_compute_critical_path(0)
    assert config.should_compute_critical_path(3)
    assert not config.should_compute_critical_path(4)


def test_critical_path_disabled() -> None:
    config = AnalysisConfig(critical_path=False)
    assert not config.should_compute_critical_path(1)
