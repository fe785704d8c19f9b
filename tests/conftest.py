"""Test configuration and fixtures."""

import pytest

from dpp_http.planner.probe import FixedProbe
from dpp_http.planner.temp import TempPathProvider

ALL_TOOLS = ("curl", "wget", "unzip", "tar", "python3", "rm", "cp", "rsync")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "scripts: tests that run the embedded python3 programs")


@pytest.fixture
def probe_with():
    """Build a probe reporting exactly the given tools as available."""
    def _make(*tools: str) -> FixedProbe:
        return FixedProbe(tools)
    return _make


@pytest.fixture
def all_tools(probe_with):
    """Probe for a host with every supported tool."""
    return probe_with(*ALL_TOOLS)


@pytest.fixture
def temp_paths():
    """Temp path provider rooted at a fixed, fake directory."""
    return TempPathProvider(root="/tmp/test-root", environ={})


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep host environment settings out of config and temp path tests."""
    for var in ("DPP_BASE_PATH", "DPP_HTTP_TMPDIR", "DPP_HTTP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
