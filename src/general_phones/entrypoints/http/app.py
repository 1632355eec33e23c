from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from general_phones.entrypoints.http.exception_handlers import register_exception_handlers
from general_phones.entrypoints.http.routes.health import router as health_router
from general_phones.entrypoints.http.routes.home import router as home_router
from general_phones.entrypoints.http.routes.phones import router as phones_router
from general_phones.infra.config import assets_dir, configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="General Phones",
        description="""
        Catalog homepage and read-only catalog API for the GeneralPhones store.

        ## Features
        - Server-rendered homepage with search and brand filter
        - Search the phone catalog
        - List brands and get phone details

        ## Error Handling
        All API errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(home_router)
    app.include_router(phones_router, prefix="/v1")

    # Image files themselves are provided by the deployment
    images = assets_dir()
    if images is not None:
        app.mount("/images", StaticFiles(directory=images), name="images")

    return app


app = build_app()
