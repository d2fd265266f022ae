"""Static server for the chart page and the metrics artifact."""

import logging
import os

from flask import Flask, abort, send_from_directory

from .output import PAGE_FILENAME


def create_app(output_dir: str, metrics_file: str) -> Flask:
    """Create a Flask app serving the chart page and its metrics artifact.

    Args:
        output_dir: Directory holding index.html and the artifact
        metrics_file: File name of the JSON artifact

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    directory = os.path.abspath(output_dir)

    @app.route("/")
    def index():
        """Serve the chart page."""
        if not os.path.exists(os.path.join(directory, PAGE_FILENAME)):
            abort(404)
        return send_from_directory(directory, PAGE_FILENAME)

    @app.route(f"/{metrics_file}")
    def metrics():
        """Serve the metrics artifact."""
        return send_from_directory(directory, metrics_file, mimetype='application/json')

    logging.info(f"Serving charts from {directory}")
    return app
