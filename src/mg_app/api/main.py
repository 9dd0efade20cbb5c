# src/mg_app/api/main.py
from fastapi import FastAPI

from mg_app.core.config import get_settings
from mg_app.core.logging import configure_logging
from mg_app.core.registry import load_module_routers
from mg_app.version import get_version


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Media Gallery", version=get_version(), debug=settings.DEBUG)
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    for r in load_module_routers():
        app.include_router(r, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
