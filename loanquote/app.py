# loanquote/app.py
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .api.routes import bp
from .utils.config import settings
from .utils.logging import get_logger
from .domain.errors import AppError

log = get_logger(__name__)

def create_app():
    app = Flask(__name__)

    app.register_blueprint(bp)

    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        log.warning(f"{type(err).__name__}: {err.message}")
        return jsonify({"error": err.message, "kind": type(err).__name__}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description, "kind": type(e).__name__}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        log.exception("Unhandled error")
        return jsonify({"error": "internal_error"}), 500

    return app

# For `flask --app loanquote.app run`
app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.ENV == "dev")
