from importlib.metadata import PackageNotFoundError, version

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vastu_server.chat.router import router as chat_router
from vastu_server.config import get_app_settings
from vastu_server.reports.router import router as reports_router
from vastu_server.utils.logger import logger


def get_version() -> str:
    """Get the installed package version."""
    try:
        return version("vastu-server")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(
    title="Vastu API",
    description="Relay between the Vastu scanner app and Gemini",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_app_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reports_router, prefix="/api")
app.include_router(chat_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"status": "ok", "message": "Vastu API is running"}


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {"status": "ok", "message": "Vastu API is running"}


def run() -> None:
    """Start the server on the configured host and port."""
    settings = get_app_settings()
    logger.info(
        "Vastu server listening",
        host=settings.host,
        port=settings.port,
        environment=settings.environment.value,
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
