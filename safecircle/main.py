"""safecircle FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from safecircle.api import auth, emergency_contacts, health, incidents, messages, notifications, panic_alert, users, ws
from safecircle.core.config import Settings, settings as default_settings
from safecircle.core.errors import register_error_handlers
from safecircle.core.security import TokenService
from safecircle.core.ws_manager import ConnectionManager
from safecircle.db.session import build_engine, build_session_factory


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with its own store, token service and realtime channel."""
    settings = settings or default_settings

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
    )

    engine = build_engine(settings.database_url, echo=settings.debug)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_expire_minutes,
    )
    app.state.ws_manager = ConnectionManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(ws.router)
    for module in (auth, users, emergency_contacts, incidents, notifications, panic_alert, messages):
        app.include_router(module.router, prefix=settings.api_prefix)

    return app


app = create_app()
