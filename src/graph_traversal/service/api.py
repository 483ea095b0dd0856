"""HTTP endpoint exposing the analysis pipeline as JSON over POST."""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from graph_traversal import __version__
from graph_traversal.analysis.traversal import UnknownStartError
from graph_traversal.config import ServiceConfig
from graph_traversal.io.request_codec import RequestValidationError
from graph_traversal.pipelines.analyse import analyse_payload

LOGGER = logging.getLogger(__name__)


def create_api(config: ServiceConfig | None = None) -> Flask:
    """
    Build the Flask application serving ``POST /`` and ``GET /health``.

    The application keeps no state between requests; every call builds its own graph.
    """

    config = config or ServiceConfig()
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["SERVICE_CONFIG"] = config

    @app.post("/")
    def analyse_endpoint():
        payload = request.get_json(silent=True)
        if payload is None:
            return jsonify({"error": "Request body must be valid JSON"}), 400
        try:
            response = analyse_payload(payload, strict_start=config.strict_start)
        except RequestValidationError as exc:
            LOGGER.info("Rejected request: %s", exc)
            return jsonify({"error": str(exc)}), 400
        except UnknownStartError as exc:
            LOGGER.info("Unknown start vertex %r", exc.start)
            return jsonify({"error": str(exc)}), 404
        return jsonify(response)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "version": __version__})

    return app


def serve(config: ServiceConfig) -> None:
    """Run the service on the configured interface until interrupted."""

    config.apply_logging()
    app = create_api(config)
    LOGGER.info("Serving graph traversal API on %s:%s (strict_start=%s)", config.host, config.port, config.strict_start)
    app.run(host=config.host, port=config.port)


__all__ = ["create_api", "serve"]
