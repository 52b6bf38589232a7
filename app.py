#!/usr/bin/env python3
"""
Main entry point for the URL redirector.

Starts the redirect HTTP server on a background thread, then runs the
interactive registration loop on the main thread. Both share a single
in-memory registry; everything is lost when the process exits.

Usage:
    python app.py

Environment variables (all optional, defaults shown):
    HOST - Host to bind to (0.0.0.0)
    PORT - Port to listen on (8080)
    BASE_URL - Base URL for printed short links (http://localhost:8080)
    LOG_LEVEL - Logging level (WARNING)
"""

import signal
import sys

from config import load_config
from redirector.registry import Registry
from redirector.service import RedirectorService
from redirector.shortcode import ShortCodeGenerator
from redirector.console import RegistrationLoop
from redirector.server import RedirectServer
from redirector.common.logging_config import setup_logging
from web_app import create_app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    logger.debug(f"Configuration: {config.model_dump()}")

    registry = Registry()
    service = RedirectorService(
        registry=registry,
        short_code_generator=ShortCodeGenerator(),
        logger=logger,
    )

    app = create_app(service_instance=service, config=config, logger=logger)

    server = RedirectServer(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level,
        access_log=config.access_log,
        logger=logger,
    )

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, shutting down...")
        server.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_signal)

    server.start()
    print(f"Server is up and running at {config.base_url.rstrip('/')}")

    loop = RegistrationLoop(
        service,
        base_url=config.base_url,
        path_prefix=config.path_prefix,
        logger=logger,
    )

    try:
        loop.run()
        # stdin is gone but redirects keep being served until terminated
        server.join()
    except KeyboardInterrupt:
        print()
    finally:
        server.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
