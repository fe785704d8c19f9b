"""Tool availability probing.

The planner asks "is this executable invocable here?" through a ``ToolProbe``.
Probes are injected so tests and dry runs can describe any host.
"""

import logging
import shutil
from typing import Iterable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ToolProbe(Protocol):
    """Protocol for tool availability checks."""

    def exists(self, name: str) -> bool:
        """Return True if the command ``name`` can be invoked on this host."""
        ...


class WhichProbe:
    """Probe that looks tools up on the host PATH."""

    def __init__(self, path: str | None = None) -> None:
        """Initialize the probe.

        Args:
            path: Search path to use instead of the PATH environment variable
        """
        self._path = path

    def exists(self, name: str) -> bool:
        return shutil.which(name, path=self._path) is not None


class FixedProbe:
    """Probe reporting a fixed set of tools as available."""

    def __init__(self, tools: Iterable[str] = ()) -> None:
        self._tools = frozenset(tools)

    @property
    def tools(self) -> frozenset[str]:
        return self._tools

    def exists(self, name: str) -> bool:
        return name in self._tools

    def __repr__(self) -> str:
        return f"FixedProbe({sorted(self._tools)!r})"


class ToolAvailability:
    """Lazy, per-plan cache of probe answers.

    Each tool is probed at most once. A probe that raises counts as the tool
    being unavailable.
    """

    def __init__(self, probe: ToolProbe) -> None:
        self._probe = probe
        self._known: dict[str, bool] = {}

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def has(self, name: str) -> bool:
        """Return whether ``name`` is available, probing on first use."""
        if name not in self._known:
            try:
                available = bool(self._probe.exists(name))
            except Exception as e:
                logger.debug("Probe for %s failed, treating as unavailable: %s", name, e)
                available = False
            logger.debug("Tool %s available: %s", name, available)
            self._known[name] = available
        return self._known[name]

    def first(self, names: Iterable[str]) -> str | None:
        """Return the first available tool from ``names`` in order."""
        for name in names:
            if self.has(name):
                return name
        return None

    def snapshot(self) -> dict[str, bool]:
        """Return a copy of the answers collected so far."""
        return dict(self._known)
