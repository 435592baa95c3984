"""Render an InheritanceGraph to a standalone HTML file."""

from __future__ import annotations

import html
import json
from pathlib import Path
from string import Template

from inheritzoom.model import GraphNode, InheritanceGraph, RelationKind

_TEMPLATE_PATH = Path(__file__).with_name("template.html")

# Edge styling per relation kind, matching the legend in template.html.
_EDGE_STYLES: dict[str, dict] = {
    RelationKind.EXTENDS_CLASS: {"label": "extends", "color": {"color": "#1E88E5"}},
    RelationKind.IMPLEMENTS_INTERFACE: {
        "label": "implements",
        "dashes": True,
        "color": {"color": "#43A047"},
    },
    RelationKind.EXTENDS_INTERFACE: {"label": "extends", "color": {"color": "#FB8C00"}},
}

EXTERNAL_GROUP = "external"


def _node_to_dict(node: GraphNode) -> dict:
    title = f"{node.kind}: {node.label}"
    if node.origin_file:
        title += f"\nFile: {Path(node.origin_file).name}"
    return {
        "id": node.id,
        "label": node.label,
        "group": node.kind,
        "title": title,
        "file": node.origin_file,
        "methods": [
            {"name": m.name, "params": m.parameters, "doc": m.documentation}
            for m in node.methods
        ],
    }


def _graph_to_json(graph: InheritanceGraph) -> str:
    """Serialize *graph* into the JSON blob consumed by the template JS."""
    nodes = [_node_to_dict(node) for node in graph.nodes.values()]

    # Edges kept with DanglingPolicy.KEEP point at undeclared types; give
    # those a placeholder node so the edge is still drawn.
    external: list[str] = []
    for edge in graph.edges:
        if edge.target not in graph.nodes and edge.target not in external:
            external.append(edge.target)
    for name in external:
        nodes.append(
            {
                "id": name,
                "label": name,
                "group": EXTERNAL_GROUP,
                "title": f"not declared in project: {name}",
                "file": None,
                "methods": [],
            }
        )

    edges = []
    for edge in graph.edges:
        entry = {"from": edge.source, "to": edge.target, "arrows": "to"}
        entry.update(_EDGE_STYLES[edge.relation])
        edges.append(entry)

    # Keep "</script>" inside strings from closing the script element.
    return json.dumps({"nodes": nodes, "edges": edges}).replace("</", "<\\/")


def render_html(graph: InheritanceGraph, output_path: Path, title: str = "") -> None:
    """Write the interactive HTML visualization to *output_path*."""
    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    page = template.safe_substitute(
        DATA_JSON=_graph_to_json(graph),
        TITLE=html.escape(title or "Java inheritance"),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
