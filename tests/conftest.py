"""
Pytest configuration and fixtures for transcode-prep tests.

Provides a provider registry populated with fake providers and a Flask
test client for the preview service.
"""
import pytest
from flask import Flask
from flask.testing import FlaskClient

from transcode_prep.config import Settings
from transcode_prep.providers import Capabilities, ProviderRegistry
from transcode_prep.web import create_app
from tests.mocks.fake_provider import FakeProvider, broken_factory


@pytest.fixture
def settings() -> Settings:
    return Settings(fps=24.0)


@pytest.fixture
def registry() -> ProviderRegistry:
    """Registry with one healthy, one unhealthy and one unbuildable provider."""
    caps = Capabilities(input_formats=['h264'], output_formats=['mp4'], destinations=['s3'])
    r = ProviderRegistry()
    r.register('healthy', FakeProvider.factory(caps))
    r.register('unhealthy', FakeProvider.factory(caps, health=RuntimeError('api is down')))
    r.register('broken', broken_factory())
    return r


@pytest.fixture
def app(registry: ProviderRegistry, settings: Settings) -> Flask:
    app = create_app(registry, settings)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
