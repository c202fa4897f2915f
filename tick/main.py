from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from tick.core.config import settings
from tick.routers import health, tasks, quicklinks, clock
from tick.services.store import Store


def create_app(store: Store, static_dir: str = settings.STATIC_DIR) -> FastAPI:
    """Construit l'app à partir d'un Store déjà ouvert et migré."""
    app = FastAPI(
        title="Tick",
        version="0.1.0"
    )
    app.state.store = store

    # Les erreurs sont renvoyées en texte brut, pas en JSON {"detail": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(err.get("msg", "invalid request") for err in exc.errors())
        return PlainTextResponse(message or "invalid request", status_code=status.HTTP_400_BAD_REQUEST)

    # Routes
    app.include_router(health.router, prefix="/health")
    app.include_router(tasks.router)
    app.include_router(quicklinks.router)
    app.include_router(clock.router)

    # Client web, monté en dernier pour ne pas masquer /api
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="web")

    return app
