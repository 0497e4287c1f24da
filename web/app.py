"""
Flask application exposing the print endpoint.
"""
import logging

from flask import Flask, Response, jsonify, request

from spooler.config import Config
from spooler.errors import PrintServerError
from spooler.job_manager import PrintJobManager

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Accept",
    "Access-Control-Max-Age": "3600",
}


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(config: Config | None = None, manager: PrintJobManager | None = None):
    if config is None:
        config = Config()

    if manager is None:
        manager = PrintJobManager.from_config(config)

    app = Flask(__name__)
    app.config["PRINT_CONFIG"] = config
    app.manager = manager

    @app.after_request
    def add_cors_headers(response):
        response.headers.update(CORS_HEADERS)
        return response

    @app.errorhandler(405)
    def method_not_allowed(error):
        allowed = sorted(error.valid_methods or [])
        valid = [m for m in allowed if m not in ("OPTIONS", "HEAD")]
        response = _text(f"Only {', '.join(valid)} method is accepted", 405)
        response.headers["Allow"] = ", ".join(allowed)
        return response

    @app.route("/print", methods=["POST", "OPTIONS"], provide_automatic_options=False)
    def print_job():
        if request.method == "OPTIONS":
            return _text("", 200)

        payload = request.get_data(cache=False)
        try:
            job = app.manager.handle_submission(payload)
        except PrintServerError as e:
            return _text(str(e), 500)

        return _text(f"Print job {job.path} sent successfully.", 200)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"level": "OK", **app.manager.stats()})

    return app
