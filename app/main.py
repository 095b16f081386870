## Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.settings import Settings
from app.logging_config import configure_logging
from app.roadmaps.routes import router as roadmaps_router

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        yield

    app = FastAPI(title="Roadmap Generator", lifespan=lifespan)
    app.state.settings = settings

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(roadmaps_router)
    return app

# Run with: uvicorn app.main:create_app --factory
