"""Run the redirect HTTP app with uvicorn, in the foreground or on a thread."""

import logging
import threading
from typing import Optional

import uvicorn


class RedirectServer:
    """uvicorn server for the redirect app.

    A failure to start (typically the port already being bound) is logged
    and recorded in ``failed``; it never propagates, so the console loop on
    the main thread keeps running.
    """

    def __init__(
        self,
        app,
        host: str = "0.0.0.0",
        port: int = 8080,
        log_level: str = "warning",
        access_log: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize server.

        Args:
            app: ASGI application to serve
            host: Host to bind to
            port: Port to listen on
            log_level: uvicorn log level
            access_log: Whether uvicorn logs every request
            logger: Optional logger
        """
        self.host = host
        self.port = port
        self.logger = logger or logging.getLogger(__name__)
        self.config = uvicorn.Config(
            app,
            host=host,
            port=port,
            log_level=log_level.lower(),
            access_log=access_log,
        )
        self.server = uvicorn.Server(self.config)
        self.failed = False
        self._thread: Optional[threading.Thread] = None

    @property
    def started(self) -> bool:
        """True once uvicorn is accepting connections."""
        return self.server.started

    def run(self) -> bool:
        """Serve in the calling thread until stopped.

        Returns:
            False if the server could not start
        """
        self.logger.info(f"Starting server on {self.host}:{self.port}")
        try:
            self.server.run()
        except SystemExit as e:
            # uvicorn logs the bind error itself, then exits
            self._record_failure(f"exit code {e.code}")
        except OSError as e:
            self._record_failure(str(e))
        return not self.failed

    def start(self) -> threading.Thread:
        """Serve on a background daemon thread."""
        self._thread = threading.Thread(
            target=self.run,
            name="redirect-server",
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the background thread to finish."""
        if self._thread:
            self._thread.join(timeout)

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """Ask uvicorn to exit and wait for the background thread."""
        self.server.should_exit = True
        self.join(timeout)

    def _record_failure(self, reason: str) -> None:
        self.failed = True
        self.logger.error(f"Server didn't start on {self.host}:{self.port}: {reason}")
