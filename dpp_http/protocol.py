"""Plugin-manager integration for HTTP(S) plugin sources.

The host calls ``detect`` to learn whether this protocol handles a plugin's
source and where it would live, then ``plan_sync`` to get the commands that
fetch it. Both are total: rejected sources give ``None`` or an empty plan.
"""

import logging
import posixpath
from dataclasses import dataclass
from typing import Any

from dpp_http.constants import REPOS_SUBDIR
from dpp_http.naming import directory_name
from dpp_http.planner.builder import build_plan
from dpp_http.planner.probe import ToolProbe, WhichProbe
from dpp_http.planner.temp import TempPathProvider
from dpp_http.planner.types import CommandPlan
from dpp_http.url import CanonicalURL, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionResult:
    """Where a detected plugin lives and where it comes from."""

    path: str
    name: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "name": self.name, "url": self.url}


class HttpProtocol:
    """HTTP(S) archive and single-file protocol.

    Usage:
        protocol = HttpProtocol(base_path="~/.cache/dpp")
        result = protocol.detect("https://github.com/o/r/archive/main.zip")
        plan = protocol.plan_sync(result.url, result.path)
    """

    name = "http"

    def __init__(
        self,
        base_path: str,
        probe: ToolProbe | None = None,
        temp_paths: TempPathProvider | None = None,
    ) -> None:
        """Initialize the protocol.

        Args:
            base_path: Root under which ``repos/<name>`` directories live
            probe: Tool availability check (defaults to a PATH lookup)
            temp_paths: Temp path provider for archive plans
        """
        self._base_path = base_path.rstrip("/") or "/"
        self._probe = probe or WhichProbe()
        self._temp_paths = temp_paths or TempPathProvider()

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def probe(self) -> ToolProbe:
        return self._probe

    def detect(self, spec: str) -> DetectionResult | None:
        """Detect a plugin source handled by this protocol.

        Args:
            spec: The plugin's declared source location

        Returns:
            DetectionResult, or None if the source is not handled
        """
        url = normalize(spec)
        if url is None:
            return None
        local_name = directory_name(url)
        return DetectionResult(
            path=posixpath.join(self._base_path, REPOS_SUBDIR, local_name),
            name=posixpath.basename(local_name),
            url=str(url),
        )

    def plan_sync(self, spec: str | CanonicalURL, destination: str) -> CommandPlan:
        """Build the commands that fetch ``spec`` into ``destination``.

        Returns:
            The command plan; empty if the source is rejected or the host
            lacks a required tool
        """
        url = spec if isinstance(spec, CanonicalURL) else normalize(spec)
        if url is None:
            logger.debug("Not planning unsupported source %r", spec)
            return CommandPlan()
        return build_plan(url, destination, self._probe, self._temp_paths)
