# app.py
import logging

from flask import Blueprint, Flask, current_app, jsonify, render_template, request
from werkzeug.middleware.proxy_fix import ProxyFix

import achievements
from config import Config
from errors import AchievementError, RateLimitError
from limiter import client_key, generate_limit, limiter
from logger_config import setup_logger

logger = logging.getLogger(__name__)

bp = Blueprint("main", __name__)


@bp.route("/")
def index():
    return render_template("index.html")


@bp.route("/about")
def about():
    return render_template("about.html")


@bp.route("/api/generate", methods=["POST"])
@limiter.limit(generate_limit)
def generate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    logger.debug("Received payload: %s", data)

    cfg = current_app.config
    try:
        result = achievements.generate_web(
            data,
            api_key=cfg.get("GEMINI_API_KEY"),
            model=cfg["GEMINI_MODEL"],
            api_url=cfg["GEMINI_API_URL"],
            timeout=cfg.get("GEMINI_TIMEOUT"),
        )
    except AchievementError as e:
        logger.warning("Generation failed (%s): %s", type(e).__name__, e)
        return jsonify(e.to_dict()), e.status_code
    return jsonify(result)


def rate_limit_exceeded(e):
    logger.warning("Rate limit exceeded for client %s", client_key())
    err = RateLimitError()
    return jsonify(err.to_dict()), err.status_code


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    setup_logger(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))

    trusted_proxies = app.config.get("TRUSTED_PROXIES") or 0
    if trusted_proxies > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=trusted_proxies)

    limiter.init_app(app)
    app.register_blueprint(bp)
    app.register_error_handler(429, rate_limit_exceeded)

    if not app.config.get("GEMINI_API_KEY"):
        logger.warning("GEMINI_API_KEY is not set; /api/generate will answer 500")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
