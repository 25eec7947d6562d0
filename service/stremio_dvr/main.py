"""DVR Recordings Stremio addon - Main entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response

from stremio_dvr.addon.service import DvrAddon, RecordingSource
from stremio_dvr.api.routes import router
from stremio_dvr.config import Settings, settings
from stremio_dvr.upstream.client import UpstreamClient

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
}


def create_app(app_settings: Settings, client: RecordingSource | None = None) -> FastAPI:
    """Build the addon application around one upstream recording source."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        source = client or UpstreamClient.from_settings(app_settings)
        app.state.addon = DvrAddon(source, app_settings)
        logger.info("EasyProxy URL: %s", app_settings.easyproxy_url)
        yield

    app = FastAPI(
        title="DVR Recordings",
        description="Stremio addon for EasyProxy DVR recordings",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        """Stremio clients fetch from any origin; OPTIONS is always answered."""
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "stremio-dvr"}

    app.include_router(router)
    return app


app = create_app(settings)


def main():
    """Run the service."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Stremio DVR addon running at http://localhost:%d", settings.port)
    logger.info("Install addon: http://localhost:%d/manifest.json", settings.port)
    uvicorn.run(
        "stremio_dvr.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
