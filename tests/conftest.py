"""
Shared fixtures for maintenance client tests.
"""

import json
import socket

import pytest
from loguru import logger

from mm.models import Settings


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any loguru sinks a test or CLI invocation left behind."""
    yield
    logger.remove()


@pytest.fixture
def settings():
    """Settings pointing at a fake maintenance API."""
    return Settings(base_url="https://x/", api_key="k", owner="ops")


@pytest.fixture
def config_file(tmp_path):
    """Write a valid config file and return its path."""
    path = tmp_path / "icinga.json"
    path.write_text(json.dumps({"BaseURL": "https://x/", "API-KEY": "k", "Owners": "ops"}))
    return str(path)


def _addrinfo(host, port):
    return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.10", 0))]


def _no_addrinfo(host, port):
    raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


@pytest.fixture
def resolvable():
    """Resolver stub that knows every host."""
    return _addrinfo


@pytest.fixture
def unresolvable():
    """Resolver stub that knows no host."""
    return _no_addrinfo
