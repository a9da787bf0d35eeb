"""Process lifecycle: serving, signal handling and bounded graceful shutdown.

Starting -> Serving -> ShuttingDown -> Stopped. A shutdown request, whether
from SIGINT/SIGTERM or from ``ServiceRunner.request_shutdown``, closes the
listener and gives in-flight requests ``Config.shutdown_timeout`` seconds to
finish. Whatever is still running after that is cancelled and its connection
closed.
"""

import logging
import signal
from types import FrameType
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Config

logger = logging.getLogger(__name__)


class GracefulServer(uvicorn.Server):
    """uvicorn server that logs the shutdown signal it receives.

    Signals are consumed here instead of being re-raised by uvicorn once
    serving finishes, so a signalled stop returns normally with status 0.
    """

    def handle_exit(self, sig: int, frame: Optional[FrameType]) -> None:
        if not self.should_exit:
            logger.info("shutdown signal received (%s)", signal.Signals(sig).name)
        super().handle_exit(sig, frame)

        captured = getattr(self, "_captured_signals", None)
        if captured and captured[-1] == sig:
            captured.pop()


class ServiceRunner:
    """Runs the application on a single listener until shutdown."""

    def __init__(self, config: Config, app: FastAPI):
        self.config = config
        self.app = app
        self.server = GracefulServer(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                timeout_graceful_shutdown=config.shutdown_timeout,
                # Logging is configured by the entry point; requests are
                # logged by our own middleware.
                log_config=None,
                access_log=False,
                log_level=config.log_level.lower(),
            )
        )

    @property
    def started(self) -> bool:
        """Whether the listener is bound and accepting connections."""
        return self.server.started

    def request_shutdown(self) -> None:
        """Begin graceful shutdown, same as receiving SIGTERM."""
        if not self.server.should_exit:
            logger.info("shutdown requested")
        self.server.should_exit = True

    def run(self) -> int:
        """
        Serve until shutdown completes.

        A listener that cannot be bound is fatal: uvicorn logs the error and
        stops, and this returns 1 whatever status uvicorn chose.

        Returns:
            Process exit code (0 after a completed shutdown, 1 on startup failure)
        """
        logger.info(f"starting on {self.config.host}:{self.config.port}")
        try:
            self.server.run()
        except SystemExit as e:
            logger.error(f"server failed to start (uvicorn exit status {e.code})")
            return 1
        except KeyboardInterrupt:
            logger.info("Server shutdown requested")

        logger.info("server stopped")
        return 0
