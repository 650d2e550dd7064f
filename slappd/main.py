import logging
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from slappd import __version__
from slappd.config import Settings, get_settings
from slappd.api.slack_routes import create_router
from slappd.auth.middleware import RequestAuthorizer
from slappd.auth.signature import RequestSignatureChecker
from slappd.slack.handlers import CommandHandler, SelectionHandler
from slappd.untappd.client import UntappdClient

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def uvicorn_options(settings: Settings) -> Dict[str, Any]:
    """Keyword arguments for uvicorn.run; the grace period bounds shutdown."""
    return {
        "host": settings.host,
        "port": settings.port,
        "reload": settings.debug,
        "log_level": settings.log_level.lower(),
        "timeout_graceful_shutdown": settings.shutdown_grace_period
    }


def create_app(
    settings: Optional[Settings] = None,
    untappd: Optional[UntappdClient] = None
) -> FastAPI:
    settings = settings or get_settings()
    untappd = untappd or UntappdClient.from_settings(settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting slappd...")
        if not settings.accepted_tokens:
            logger.warning("SLACK_TOKEN is not set, slash commands will be refused")
        if not settings.untappd_client_id or not settings.untappd_client_secret:
            logger.warning("Untappd credentials are not set, searches will fail")
        
        yield
        
        logger.info("slappd shutting down...")
    
    app = FastAPI(
        title="slappd",
        description="Slack slash command for Untappd beer search",
        version=__version__,
        lifespan=lifespan
    )
    
    authorize = RequestAuthorizer(settings.accepted_tokens)
    app.include_router(create_router(
        search_handler=authorize(CommandHandler(untappd, max_results=settings.max_results)),
        select_handler=SelectionHandler(untappd),
        signature=RequestSignatureChecker(settings.slack_signing_secret)
    ))
    
    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "slappd",
            "version": __version__
        }
    
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"}
        )
    
    return app


configure_logging(get_settings())
app = create_app()
