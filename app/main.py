import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.directory.api import api_router
from app.directory.core.config import settings
from app.directory.core.errors import setup_exception_handlers
from app.directory.core.logging import configure_logging
from app.directory.middleware.observability import ObservabilityMiddleware
from app.directory.middleware.trace import TraceIdMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_methods=settings.CORS_ALLOWED_METHODS,
        allow_headers=settings.CORS_ALLOWED_HEADERS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        expose_headers=["X-Trace-ID"],
    )
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    print(f"Listening on http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print(f"API endpoint: http://{settings.SERVER_HOST}:{settings.SERVER_PORT}/api/users")
    uvicorn.run("app.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)
