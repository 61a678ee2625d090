"""Loading and saving graph records.

A graph record is a mapping::

    directed: true          # optional, default true
    n: 4
    source: 0               # optional, default 0
    weight_model: edge      # optional
    edges:
      - {u: 0, v: 1, w: 2}
      - [1, 2, 5]           # [u, v, w] triples are accepted too

Files are parsed with ``yaml.safe_load``, which also reads JSON documents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from dagpath.config import ANALYSIS_CONFIG, AnalysisConfig
from dagpath.graph.model import Edge, Graph
from dagpath.logging import get_logger

logger = get_logger(__name__)

_ALLOWED_KEYS = {"directed", "n", "edges", "source", "weight_model"}


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _parse_edge(entry: Any, idx: int) -> Edge:
    if isinstance(entry, Mapping):
        missing = [k for k in ("u", "v", "w") if k not in entry]
        if missing:
            raise ValueError(f"Edge #{idx} is missing keys: {', '.join(missing)}")
        u, v, w = entry["u"], entry["v"], entry["w"]
    elif isinstance(entry, (list, tuple)) and len(entry) == 3:
        u, v, w = entry
    else:
        raise ValueError(
            f"Edge #{idx} must be a mapping with u, v, w or a [u, v, w] triple"
        )
    return Edge(
        _as_int(u, f"Edge #{idx} u"),
        _as_int(v, f"Edge #{idx} v"),
        _as_int(w, f"Edge #{idx} w"),
    )


def graph_from_dict(
    data: Mapping[str, Any], config: Optional[AnalysisConfig] = None
) -> Graph:
    """Build and validate a `Graph` from a record mapping.

    Args:
        data: Graph record.
        config: Loader limits, defaults to ``ANALYSIS_CONFIG``.

    Returns:
        A graph that passes ``validate()``.

    Raises:
        ValueError: If the record is malformed, exceeds the configured size
            limit, or describes an invalid graph.
    """
    cfg = config or ANALYSIS_CONFIG
    if not isinstance(data, Mapping):
        raise ValueError("Graph record must be a mapping at top-level.")

    unknown = sorted(str(k) for k in data.keys() if k not in _ALLOWED_KEYS)
    if unknown:
        raise ValueError(f"Unrecognized keys in graph record: {', '.join(unknown)}")
    if "n" not in data:
        raise ValueError("Graph record must include 'n'")

    n = _as_int(data["n"], "'n'")
    cfg.check_size(n)
    source = _as_int(data.get("source", 0), "'source'")
    directed = data.get("directed", True)
    if not isinstance(directed, bool):
        raise ValueError(f"'directed' must be a boolean, got {directed!r}")
    weight_model = data.get("weight_model")
    if weight_model is not None:
        weight_model = str(weight_model)

    raw_edges = data.get("edges")
    if raw_edges is None:
        raw_edges = []
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")
    edges: List[Edge] = [_parse_edge(e, i) for i, e in enumerate(raw_edges)]

    graph = Graph(
        directed=directed,
        n=n,
        edges=edges,
        source=source,
        weight_model=weight_model,
    )
    if not graph.validate():
        raise ValueError(
            "Invalid graph structure: need n > 0, 0 <= source < n and "
            f"edge endpoints in [0, n), got n={n}, source={source}"
        )
    return graph


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Return the record mapping for ``graph``."""
    return graph.to_dict()


def load_graph(
    path: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> Graph:
    """Load a graph record from a JSON or YAML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file content is not a valid graph record.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Cannot parse graph file {path}: {exc}") from exc
    if data is None:
        data = {}

    try:
        graph = graph_from_dict(data, config)
    except ValueError as exc:
        raise ValueError(f"Invalid graph file {path}: {exc}") from exc

    logger.debug("Loaded %r from %s", graph, path)
    return graph


def save_graph(graph: Graph, path: Union[str, Path]) -> None:
    """Write ``graph`` as a JSON record."""
    Path(path).write_text(
        json.dumps(graph_to_dict(graph), indent=2), encoding="utf-8"
    )
