"""CORS for the survey and admin UIs.

No cookies are used (admin access is a header), so credentials stay off and
only the headers the UIs actually send are allowed.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolpulse.config import Settings
from schoolpulse.middleware.request_id import REQUEST_ID_HEADER

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]
ALLOWED_HEADERS = ["Content-Type", "X-Admin-Code", REQUEST_ID_HEADER]


def setup_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
        max_age=600,
    )
