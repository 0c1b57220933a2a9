from fastapi import FastAPI
from pydantic import BaseModel

from learnhub.api.resources import router as resources_router
from learnhub.core.config import Settings, settings
from learnhub.core.logging import configure_logging
from learnhub.services.controller import build_controller

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    ok: bool
    service: str
    version: str


def create_app(s: Settings = settings) -> FastAPI:
    configure_logging(s.log_level)

    app = FastAPI(title="LearnHub API", version=VERSION)
    app.state.controller = build_controller(s)
    app.include_router(resources_router)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(ok=True, service="api", version=app.version)

    return app


app = create_app()
