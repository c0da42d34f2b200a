from fastapi import FastAPI

from roster_lite.entrypoints.http.exception_handlers import register_exception_handlers
from roster_lite.entrypoints.http.routes.health import router as health_router
from roster_lite.entrypoints.http.routes.members import router as members_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Roster Lite API",
        description="""
        Member directory API with composable search filters.

        ## Features
        - Search members by username, team and age range
        - Ordering with explicit null placement
        - Offset/limit paging with an optional total count

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(members_router, prefix="/v1")

    return app


app = build_app()
