"""FastAPI application setup and routing for the go-cloud API."""

import logging
import sys
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from . import health, version
from .config import Config
from .errors import register_exception_handlers
from .lifecycle import ServiceRunner
from .middleware import install_request_logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Service configuration. Loaded from the environment when omitted.

    Returns:
        Application serving /, /healthz and /readyz.
    """
    if config is None:
        config = Config.from_env()

    # The route table is the whole public surface; no docs or schema endpoints
    app = FastAPI(
        title="go-cloud",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config

    register_exception_handlers(app)
    install_request_logging(app)

    app.include_router(health.router, tags=["health"])
    # Catch-all root router goes last
    app.include_router(version.router, tags=["root"])

    return app


def configure_logging(config: Config) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO), format=LOG_FORMAT)


def serve(config: Config) -> int:
    """Run the service until it is shut down and return the process exit code."""
    configure_logging(config)
    runner = ServiceRunner(config, create_app(config))
    return runner.run()


def main():
    """Entry point for go-cloud-server command."""
    try:
        config = Config.from_env()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    sys.exit(serve(config))


if __name__ == "__main__":
    main()
