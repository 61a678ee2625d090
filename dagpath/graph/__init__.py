"""Graph primitives and helpers.

This package provides the integer-indexed `Graph` and `Edge` types and helper
modules for NetworkX conversion (`convert`) and record loading (`io`).
"""

from dagpath.graph.model import Edge, Graph

__all__ = ["Edge", "Graph"]
