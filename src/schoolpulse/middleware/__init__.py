"""Middleware registration."""

from fastapi import FastAPI

from schoolpulse.config import Settings
from schoolpulse.middleware.cors import setup_cors
from schoolpulse.middleware.error_handler import setup_error_handlers
from schoolpulse.middleware.logging import setup_logging
from schoolpulse.middleware.request_id import RequestIdMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    Starlette runs middleware in reverse-add order (last added = outermost).
    CORS is added last so it also wraps error responses.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)
