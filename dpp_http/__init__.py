"""dpp-http: fetch plugins from HTTP(S) archives and raw files.

Public API:
- normalize / CanonicalURL: URL acceptance and canonical form
- directory_name: local directory name for a plugin URL
- ArchiveKind / kind_of / looks_like_archive: archive detection
- build_plan / Command / CommandPlan: command plan synthesis
- ToolProbe / WhichProbe / FixedProbe: tool availability checks
- HttpProtocol / DetectionResult: plugin-manager integration
"""

from dpp_http.archive import ArchiveKind, kind_of, looks_like_archive
from dpp_http.naming import directory_name
from dpp_http.planner import (
    Command,
    CommandPlan,
    FixedProbe,
    TempPathProvider,
    ToolProbe,
    WhichProbe,
    build_plan,
)
from dpp_http.protocol import DetectionResult, HttpProtocol
from dpp_http.url import CanonicalURL, normalize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # URLs and names
    "CanonicalURL",
    "normalize",
    "directory_name",
    # Archive detection
    "ArchiveKind",
    "kind_of",
    "looks_like_archive",
    # Planning
    "Command",
    "CommandPlan",
    "build_plan",
    "TempPathProvider",
    # Probes
    "ToolProbe",
    "WhichProbe",
    "FixedProbe",
    # Host integration
    "HttpProtocol",
    "DetectionResult",
]
