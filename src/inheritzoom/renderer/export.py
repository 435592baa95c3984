"""Write an InheritanceGraph as JSON or YAML data."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from inheritzoom.model import InheritanceGraph

_YAML_SUFFIXES = {".yaml", ".yml"}


def dump_graph(graph: InheritanceGraph, fmt: str = "json") -> str:
    """Return ``graph.to_dict()`` serialized as ``"json"`` or ``"yaml"``."""
    data = graph.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unknown export format: {fmt!r}")


def write_graph(graph: InheritanceGraph, output_path: Path) -> None:
    """Write *graph* to *output_path*; the suffix picks YAML or JSON."""
    fmt = "yaml" if output_path.suffix.lower() in _YAML_SUFFIXES else "json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_graph(graph, fmt), encoding="utf-8")
