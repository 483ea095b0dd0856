"""Dash application for exploring BFS and DFS orders interactively."""

from __future__ import annotations

import json
from typing import List

import dash
import dash_cytoscape as cyto
from dash import Dash, Input, Output, dcc, html

from graph_traversal.analysis.traversal import UnknownStartError, reachable
from graph_traversal.config import ServiceConfig
from graph_traversal.io.request_codec import RequestValidationError, parse_request
from graph_traversal.pipelines.analyse import AnalysisResult, analyse

PALETTE = {
    "start": "#f97316",
    "visited": "#38bdf8",
    "unvisited": "#475569",
}

LAYOUT_PRESETS = {
    "breadthfirst": {"name": "breadthfirst", "directed": True, "spacingFactor": 1.1, "padding": 25},
    "cose": {"name": "cose", "idealEdgeLength": 120, "nodeRepulsion": 4200},
    "circle": {"name": "circle", "padding": 25},
}

SAMPLE_EDGES = {"a": ["b", "c"], "b": ["d"], "c": ["d", "e"], "e": ["a"]}

STYLESHEET = [
    {
        "selector": "node",
        "style": {
            "label": "data(label)",
            "background-color": "data(color)",
            "color": "#e2e8f0",
            "font-size": 11,
            "text-valign": "center",
            "width": 34,
            "height": 34,
        },
    },
    {"selector": "edge", "style": {"width": 1.5, "line-color": "#64748b", "curve-style": "bezier"}},
    {
        "selector": ".directed",
        "style": {"target-arrow-shape": "triangle", "target-arrow-color": "#64748b"},
    },
]


def traversal_elements(result: AnalysisResult, method: str = "bfs") -> List[dict]:
    """Cytoscape elements for ``result`` with vertices labelled by visitation index."""

    order = result.bfs_result if method == "bfs" else result.dfs_result
    rank = {vertex: idx for idx, vertex in enumerate(order)}
    graph = result.graph

    elements: List[dict] = []
    for vertex in graph.vertices:
        if vertex == result.start:
            color = PALETTE["start"]
        elif vertex in rank:
            color = PALETTE["visited"]
        else:
            color = PALETTE["unvisited"]
        label = f"{vertex} ({rank[vertex] + 1})" if vertex in rank else vertex
        elements.append({"data": {"id": vertex, "label": label, "color": color, "rank": rank.get(vertex)}})

    edge_class = "directed" if graph.is_directed else "undirected"
    for idx, (origin, destination) in enumerate(graph.added_edges()):
        elements.append(
            {
                "data": {"id": f"edge-{idx}", "source": origin, "target": destination},
                "classes": edge_class,
            }
        )
    return elements


def _summary(result: AnalysisResult) -> html.Div:
    return html.Div(
        [
            html.P(f"BFS: {' → '.join(result.bfs_result)}"),
            html.P(f"DFS: {' → '.join(result.dfs_result)}"),
            html.P(
                f"{len(result.graph.vertices)} vertices, {result.graph.edge_count} edges, "
                f"{len(reachable(result.graph, result.start))} reachable from {result.start}"
            ),
        ]
    )


def create_app(config: ServiceConfig | None = None) -> Dash:
    config = config or ServiceConfig()

    app = dash.Dash(__name__)
    app.title = "Graph Traversal Explorer"

    app.layout = html.Div(
        [
            html.H1("Graph Traversal Explorer", className="title"),
            html.Div(
                [
                    html.Label("Edges (JSON object of vertex -> list of vertices)"),
                    dcc.Textarea(id="edges-input", value=json.dumps(SAMPLE_EDGES, indent=2), style={"width": "100%", "height": 180}),
                    html.Label("Graph type"),
                    dcc.RadioItems(
                        id="graph-type",
                        options=[{"label": "Directed", "value": "directed"}, {"label": "Undirected", "value": "undirected"}],
                        value="directed",
                        inline=True,
                    ),
                    html.Label("Start vertex"),
                    dcc.Input(id="start-vertex", type="text", value="a", debounce=True),
                    html.Label("Highlight"),
                    dcc.RadioItems(
                        id="method",
                        options=[{"label": "BFS", "value": "bfs"}, {"label": "DFS", "value": "dfs"}],
                        value="bfs",
                        inline=True,
                    ),
                    html.Label("Layout"),
                    dcc.Dropdown(
                        id="layout-mode",
                        options=[{"label": name, "value": name} for name in LAYOUT_PRESETS],
                        value="breadthfirst",
                        clearable=False,
                    ),
                ],
                className="controls",
            ),
            html.Div(id="status", className="status"),
            cyto.Cytoscape(
                id="graph-view",
                elements=[],
                layout=LAYOUT_PRESETS["breadthfirst"],
                stylesheet=STYLESHEET,
                style={"width": "100%", "height": "560px"},
            ),
        ]
    )

    @app.callback(
        Output("graph-view", "elements"),
        Output("graph-view", "layout"),
        Output("status", "children"),
        Input("edges-input", "value"),
        Input("graph-type", "value"),
        Input("start-vertex", "value"),
        Input("method", "value"),
        Input("layout-mode", "value"),
    )
    def update_graph(edges_text: str, graph_type: str, start: str, method: str, layout_mode: str):
        layout = dict(LAYOUT_PRESETS.get(layout_mode, LAYOUT_PRESETS["breadthfirst"]))
        try:
            edges = json.loads(edges_text or "{}")
            request = parse_request({"graph_type": graph_type, "edges": edges, "start": start or ""})
            result = analyse(request, strict_start=config.strict_start)
        except json.JSONDecodeError as exc:
            return [], layout, html.Div(f"Invalid JSON: {exc}", className="error")
        except (RequestValidationError, UnknownStartError) as exc:
            return [], layout, html.Div(str(exc), className="error")

        if layout.get("name") == "breadthfirst" and result.start in result.graph:
            layout["roots"] = f"[id = {json.dumps(result.start)}]"
        return traversal_elements(result, method), layout, _summary(result)

    return app


__all__ = ["create_app", "traversal_elements"]
