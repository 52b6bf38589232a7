"""Interactive console loop for registering short URLs."""

import logging
import sys
from typing import Optional, TextIO

from .service import RedirectorService
from .common.url_builder import build_short_url
from .common.validators import first_token

LONG_URL_PROMPT = "Enter long URL: "
CUSTOM_CODE_PROMPT = "Enter custom short URL (optional): "


class RegistrationLoop:
    """Prompt for long URLs and register them until input ends.

    A blank answer to the custom short URL prompt means "assign the next
    sequential code". A line that cannot be decoded is treated like a blank
    line. End of input, or a stream that can no longer be read, stops the
    loop without touching the HTTP server.
    """

    def __init__(
        self,
        service: RedirectorService,
        base_url: str = "http://localhost:8080",
        path_prefix: str = "",
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize registration loop.

        Args:
            service: Service the registrations go through
            base_url: Base URL printed in front of each short code
            path_prefix: Optional path prefix for printed short URLs
            input_stream: Where answers are read from (defaults to stdin)
            output_stream: Where prompts are written (defaults to stdout)
            logger: Optional logger
        """
        self.service = service
        self.base_url = base_url
        self.path_prefix = path_prefix
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def run(self) -> int:
        """Run until end of input.

        Returns:
            Number of URLs registered
        """
        registered = 0
        while self.register_once() is not None:
            registered += 1

        self.logger.info(f"Console input closed after {registered} registrations")
        return registered

    def register_once(self) -> Optional[str]:
        """Run one prompt/register/print cycle.

        Returns:
            The printed short URL, or None once input has ended
        """
        long_url = self._ask(LONG_URL_PROMPT)
        if long_url is None:
            return None

        custom_code = self._ask(CUSTOM_CODE_PROMPT)
        if custom_code is None:
            # Input ended mid-entry: still register what was typed
            custom_code = ""

        result = self.service.create_short_url(long_url, custom_code=custom_code)
        short_url = build_short_url(
            short_code=result["short_code"],
            base_url=self.base_url,
            path_prefix=self.path_prefix,
        )

        self.output.write(f"Your short URL is: {short_url}\n\n")
        self.output.flush()
        return short_url

    def _ask(self, prompt: str) -> Optional[str]:
        """Write a prompt and read one token; None on end of input."""
        self.output.write(prompt)
        self.output.flush()

        try:
            line = self.input.readline()
        except UnicodeDecodeError as e:
            self.logger.warning(f"Could not decode console input: {e}")
            return ""
        except OSError as e:
            self.logger.error(f"Console input unavailable: {e}")
            return None

        if line == "":
            return None
        return first_token(line)
