"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from redirector.registry import Registry
from redirector.service import RedirectorService
from redirector.shortcode import ShortCodeGenerator
from redirector.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def registry():
    """Fresh, empty registry."""
    return Registry()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator()


@pytest.fixture
def service(registry, short_code_generator, logger) -> RedirectorService:
    """Create service instance."""
    return RedirectorService(
        registry=registry,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration with the stock defaults."""
    return Config(_env_file=None)


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456",
    ]
