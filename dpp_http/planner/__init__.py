"""Command plan synthesis for fetching and extracting plugin artifacts."""

from dpp_http.planner.builder import build_plan
from dpp_http.planner.probe import FixedProbe, ToolAvailability, ToolProbe, WhichProbe
from dpp_http.planner.temp import TempPathProvider, TempPaths
from dpp_http.planner.types import Command, CommandPlan

__all__ = [
    # Types
    "Command",
    "CommandPlan",
    # Probes
    "ToolProbe",
    "WhichProbe",
    "FixedProbe",
    "ToolAvailability",
    # Temp paths
    "TempPathProvider",
    "TempPaths",
    # Builder
    "build_plan",
]
