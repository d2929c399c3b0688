"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dependencies import get_config
from error_handlers import register_error_handlers
from routes import ask_router

patch_all()

app = FastAPI(title="Abe Answers")
app.include_router(ask_router)
register_error_handlers(app)

_origins = get_config().cors_allow_origins
if _origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_origins,
        allow_methods=["POST"],
        allow_headers=["Content-Type", "x-access-password"],
    )
