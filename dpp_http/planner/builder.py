"""Command plan synthesis.

``build_plan`` turns a canonical URL and a destination into the ordered
commands that fetch the artifact and, for archives, extract it. It only
describes work; nothing is executed and the filesystem is never touched.

Tool preference is fixed: native tools first, ``python3`` as the universal
fallback. Optional steps with no supporting tool are dropped (cleanup) and
required steps with no supporting tool yield an empty plan.
"""

import logging
import posixpath

from dpp_http.archive import ArchiveKind, kind_of, looks_like_archive, matching_extension
from dpp_http.constants import DOWNLOADERS
from dpp_http.planner.probe import ToolAvailability, ToolProbe
from dpp_http.planner.scripts import FLATTEN_MOVE, TAR_EXTRACT, ZIP_EXTRACT
from dpp_http.planner.temp import TempPathProvider
from dpp_http.planner.types import Command, CommandPlan
from dpp_http.url import CanonicalURL

logger = logging.getLogger(__name__)


def _parent(path: str) -> str:
    parent = posixpath.dirname(path.rstrip("/"))
    return parent or "."


def _download(tool: str, url: str, target: str) -> Command:
    if tool == "curl":
        return Command("curl", ("-L", "--fail", "-sSf", "-o", target, url))
    return Command("wget", ("-q", "-O", target, url))


def _python(script: str, *args: str) -> Command:
    return Command("python3", ("-c", script, *args))


def _extract_zip(
    tools: ToolAvailability, archive: str, staging: str
) -> Command | None:
    if tools.has("unzip"):
        return Command("unzip", ("-o", archive, "-d", staging))
    if tools.has("python3"):
        return _python(ZIP_EXTRACT, archive, staging)
    return None


def _move(tools: ToolAvailability, staging: str, destination: str) -> Command | None:
    """Relocate staged content into the destination.

    Only the python3 mover unwraps a single top-level directory; cp and
    rsync copy the staging directory as is.
    """
    if tools.has("python3"):
        return _python(FLATTEN_MOVE, staging, destination)
    if tools.has("cp"):
        return Command("cp", ("-a", f"{staging}/.", destination))
    if tools.has("rsync"):
        return Command("rsync", ("-a", f"{staging}/", destination))
    return None


def build_plan(
    url: CanonicalURL,
    destination: str,
    probe: ToolProbe,
    temp_paths: TempPathProvider | None = None,
) -> CommandPlan:
    """Build the ordered command plan for fetching ``url`` into ``destination``.

    Args:
        url: Normalized plugin URL
        destination: Directory for archives, file path for single files
        probe: Tool availability check
        temp_paths: Temp path provider (defaults to environment-based one)

    Returns:
        The command plan, empty if the host lacks a required tool
    """
    tools = ToolAvailability(probe)
    address = str(url)
    is_archive = looks_like_archive(url.path, url.host)
    kind = kind_of(url.path)

    if is_archive:
        commands = [Command("mkdir", ("-p", destination))]
    else:
        commands = [Command("mkdir", ("-p", _parent(destination)))]

    downloader = tools.first(DOWNLOADERS)
    if downloader is None:
        logger.debug("No downloader available for %s", address)
        return CommandPlan()

    if not is_archive:
        commands.append(_download(downloader, address, destination))
        return CommandPlan(commands)

    temp = (temp_paths or TempPathProvider()).allocate(
        matching_extension(url.path) or ""
    )
    commands.append(_download(downloader, address, temp.file))

    staged = True
    if kind is ArchiveKind.ZIP:
        extract = _extract_zip(tools, temp.file, temp.directory)
    elif tools.has("tar"):
        extract = Command(
            "tar", ("-xf", temp.file, "-C", destination, "--strip-components=1")
        )
        staged = False
    elif tools.has("python3"):
        extract = _python(TAR_EXTRACT, temp.file, temp.directory)
    else:
        extract = None

    if extract is None:
        logger.debug("No extractor for %s archive %s", kind.value, address)
        return CommandPlan()
    commands.append(extract)

    if staged:
        move = _move(tools, temp.directory, destination)
        if move is None:
            logger.debug("No tool can move extracted files for %s", address)
            return CommandPlan()
        commands.append(move)

    if tools.has("rm"):
        commands.append(Command("rm", ("-f", temp.file)))
        if staged:
            commands.append(Command("rm", ("-rf", temp.directory)))

    return CommandPlan(
        commands,
        temp_file=temp.file,
        temp_dir=temp.directory if staged else None,
    )
