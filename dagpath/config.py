"""Configuration classes for dagpath components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AnalysisConfig:
    """Configuration for the analysis pipeline and graph loading."""

    # Run both order validators after Kahn's pass and log any violation
    self_check: bool = True

    # Upper bound on vertex count accepted by the loader; None disables it
    max_vertices: Optional[int] = None

    def check_size(self, n: int) -> None:
        """Raise ValueError if ``n`` exceeds ``max_vertices``."""
        if self.max_vertices is not None and n > self.max_vertices:
            raise ValueError(
                f"Graph has {n} vertices, limit is {self.max_vertices}"
            )


# Global configuration instance
ANALYSIS_CONFIG = AnalysisConfig()
