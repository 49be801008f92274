import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import models
from .config import Settings, get_settings
from .routers import auth, categories, comments, posts, users
from .store import InMemoryStore

logger = logging.getLogger(__name__)


def _seed_defaults(store: InMemoryStore, settings: Settings) -> None:
    """Add an admin account so the mock identity resolves to a real user."""
    if store.count(models.User):
        return
    user_id = store.append(
        models.User(
            username="admin",
            email="admin@blog.local",
            role=settings.mock_user_role,
            bio="Demo administrator",
        )
    )
    logger.info("Seeded demo admin user id=%s", user_id)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryStore] = None,
) -> FastAPI:
    """Build the application around an explicitly owned store."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="Posts, categories, comments and users over an in-memory store.",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryStore()
    app.dependency_overrides[get_settings] = lambda: settings

    for module in (auth, posts, categories, comments, users):
        app.include_router(module.router, prefix=settings.api_prefix)

    @app.on_event("startup")
    def on_startup() -> None:
        logger.warning(
            "Authentication is stubbed and passwords are stored unhashed. "
            "Do not expose this service to real users."
        )
        if settings.seed_demo_data:
            _seed_defaults(app.state.store, settings)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies and path parameters share the 400 used for missing fields.
        return JSONResponse(
            {"detail": jsonable_encoder(exc.errors())},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled application error", exc_info=exc)
        return JSONResponse(
            {"detail": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/")
    def read_root():
        return {"message": f"{settings.app_name} is up"}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
