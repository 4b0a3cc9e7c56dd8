"""
Shared pytest fixtures for the sdstatus test suite.
Provides fake HTTP responses so probes never leave the machine.
"""

from typing import Dict
from unittest.mock import MagicMock, patch

import pytest

from sdstatus.core.proxy import build_proxy_client
from sdstatus.core.scan_config import ScanConfig
from ._helpers import Behavior, fake_get_factory


@pytest.fixture
def scan_config():
    """
    Create a default ScanConfig for testing.

    Returns:
        ScanConfig: Default configuration instance
    """
    return ScanConfig()


@pytest.fixture
def proxy_client(scan_config):
    """Proxy client bound to the default local Tor port."""
    return build_proxy_client(scan_config.proxy_addr, scan_config.timeout)


@pytest.fixture
def mock_get():
    """
    Patch requests.get for the duration of a test.

    Returns:
        Callable: install(behaviors) -> MagicMock, which routes each
        request to the behavior registered for its host
    """
    with patch('sdstatus.core.proxy.requests.get') as patched:
        def install(behaviors: Dict[str, Behavior]) -> MagicMock:
            patched.side_effect = fake_get_factory(behaviors)
            return patched
        yield install


@pytest.fixture
def targets_file(tmp_path):
    """
    Write a target list with blank and padded lines.

    Returns:
        Path: file containing two usable targets
    """
    path = tmp_path / 'sdonion.txt'
    path.write_text(
        'first.onion\n'
        '\n'
        '   second.onion  \n'
        '\t\n',
        encoding='utf-8'
    )
    return path
