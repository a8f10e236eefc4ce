"""Configuration classes for depgraph analysis runs."""

from dataclasses import dataclass

from depgraph.algorithms.toposort import SortAlg
from depgraph.graph.model import DEFAULT_WEIGHT_TYPE


@dataclass
class AnalysisConfig:
    """Settings for :func:`depgraph.pipeline.analyze`."""

    # Strategy for ordering condensation components
    sort_alg: SortAlg = SortAlg.KAHN

    # Compute the all-pairs critical path after single-source analysis
    critical_path: bool = True

    # Largest condensation (in components) for which the critical path is computed
    critical_path_max_components: int = 5000

    # Weight-model label for graph documents that do not declare one
    default_weight_type: str = DEFAULT_WEIGHT_TYPE

    def should_compute_critical_path(self, num_components: int) -> bool:
        """Return True if the critical path should run for this condensation size."""
        return self.critical_path and num_components <= self.critical_path_max_components


# Global configuration instance
ANALYSIS_CONFIG = AnalysisConfig()
