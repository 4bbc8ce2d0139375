from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .api import users, villa_numbers, villas
from .core.logging_config import setup_logging
from .exception_handlers import register_exception_handlers


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Villa and villa number management API",
        version="1.0.0",
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(users.router)
    app.include_router(villas.router)
    app.include_router(villa_numbers.router)

    @app.get("/api/health")
    def health_check():
        return {"status": "healthy"}

    return app


# Schema is owned by the Alembic migrations (see migrate.py)
app = create_app()
