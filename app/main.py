# app/main.py
# Serve with: uvicorn app.main:app  (seed first: python -m app.utils.seed_products)
from contextlib import asynccontextmanager

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.engine import Engine

from app.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.core.observability import ObservabilityMiddleware
from app.db.core import init_db, make_engine
from app.api.routers import products


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(engine: Engine = None) -> FastAPI:
    """
    Composition root: engine, middleware, error handlers and routers.
    Pass `engine` to run against a store other than DefaultConnection.
    """
    configure_logging(settings.log_level)
    docs = settings.docs_enabled
    app = FastAPI(
        title="Product API",
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.engine = engine if engine is not None else make_engine()

    # CORS: any origin/method/header unless CORS_ORIGINS narrows origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ObservabilityMiddleware)

    # one registry per app so several apps can live in one process
    Instrumentator(registry=CollectorRegistry()).instrument(app).expose(
        app, endpoint="/metrics", include_in_schema=False
    )
    register_error_handlers(app)

    # Routers
    app.include_router(products.router, prefix="/api")

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


# module-level app for uvicorn; builds the DefaultConnection engine on import
app = create_app()
