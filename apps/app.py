# -*- coding: utf-8 -*-
"""Gradio UI for campus shortest paths and closest destinations."""

import logging
from typing import List

import gradio as gr

from campus_routes.config import configure_logging, get_config
from campus_routes.container import get_container
from campus_routes.domain.errors import GraphLoadError, StructuralError
from campus_routes.ports.rendering import RouteRendererPort
from campus_routes.services import RouteBackend

configure_logging()
logger = logging.getLogger("campus_routes.app")

CONFIG = get_config()
CONTAINER = get_container()
BACKEND: RouteBackend = CONTAINER.resolve(RouteBackend)
FRONTEND: RouteRendererPort = CONTAINER.resolve(RouteRendererPort)

try:
    BACKEND.load_graph_data(CONFIG.graph.graph_path)
except (GraphLoadError, StructuralError) as e:
    logger.error("Graph data unavailable", extra={"error": str(e)})


def _locations() -> List[str]:
    return sorted(BACKEND.list_locations())


def find_shortest_path(start: str, end: str) -> str:
    return FRONTEND.shortest_path_response(start.strip(), end.strip())


def find_closest(start: str) -> str:
    return FRONTEND.closest_destinations_response(start.strip())


def reload_graph(path: str):
    """Load a graph file and refresh the location pickers."""
    try:
        BACKEND.load_graph_data(path.strip() or CONFIG.graph.graph_path)
        status = f"✅ {len(BACKEND.list_locations())} locations loaded."
    except (GraphLoadError, StructuralError) as e:
        status = f"❌ {e}"
    choices = _locations()
    return (status, *(gr.update(choices=choices) for _ in range(3)))


with gr.Blocks(title="Campus shortest paths") as app:
    gr.Markdown("# 🗺️ Campus shortest paths")

    with gr.Row():
        graph_path = gr.Textbox(
            value=str(CONFIG.graph.graph_path), label="📂 Graph file (DOT)"
        )
        btn_reload = gr.Button("🔄 Load")
    load_status = gr.Markdown()

    gr.Markdown("## 🚶 Shortest path")
    with gr.Row():
        start_dd = gr.Dropdown(_locations(), label="Start", allow_custom_value=True)
        end_dd = gr.Dropdown(_locations(), label="Destination", allow_custom_value=True)
    btn_path = gr.Button("Find Shortest Path")
    path_view = gr.HTML(value="<p></p>")

    gr.Markdown(f"## 📍 {CONFIG.query.closest_destinations} closest destinations")
    from_dd = gr.Dropdown(_locations(), label="Location", allow_custom_value=True)
    btn_closest = gr.Button("Closest Destinations")
    closest_view = gr.HTML(value="<p></p>")

    btn_reload.click(
        reload_graph, inputs=graph_path, outputs=[load_status, start_dd, end_dd, from_dd]
    )
    btn_path.click(find_shortest_path, inputs=[start_dd, end_dd], outputs=path_view)
    btn_closest.click(find_closest, inputs=from_dd, outputs=closest_view)

if __name__ == "__main__":
    app.launch()
