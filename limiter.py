"""
Rate limiter shared by the app and its routes.

Storage comes from ``RATELIMIT_STORAGE_URI`` when ``limiter.init_app`` runs:
``memory://`` (default) is per-process and resets on restart, a
``redis://`` URI shares counters between instances.

Clients are keyed by ``request.remote_addr``. Behind reverse proxies,
``create_app`` wraps the app in werkzeug's ``ProxyFix`` with
``TRUSTED_PROXIES`` hops so the address comes from X-Forwarded-For
entries those proxies appended, never from whatever the client sent.
"""
from flask import current_app, request
from flask_limiter import Limiter

UNKNOWN_CLIENT = "unknown"


def client_key() -> str:
    """Peer address (proxy-corrected), else a shared sentinel bucket."""
    return request.remote_addr or UNKNOWN_CLIENT


def generate_limit() -> str:
    return current_app.config["GENERATE_RATE_LIMIT"]


limiter = Limiter(key_func=client_key)
