from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware
from .config import settings
from .dependencies import AccessDenied, LoginRequired
from .logging_config import setup_logging
from .routes import auth, home, villa, villa_number


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Magic Villa web frontend",
        version="1.0.0",
        debug=settings.debug,
    )

    # Session holds the API bearer token and flash messages
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
    )

    @app.exception_handler(LoginRequired)
    async def login_required_handler(request: Request, exc: LoginRequired):
        return RedirectResponse(url="/auth/login", status_code=303)

    @app.exception_handler(AccessDenied)
    async def access_denied_handler(request: Request, exc: AccessDenied):
        return RedirectResponse(url="/auth/access-denied", status_code=303)

    # Include routers
    app.include_router(home.router)
    app.include_router(auth.router)
    app.include_router(villa.router)
    app.include_router(villa_number.router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
