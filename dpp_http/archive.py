"""Archive kind detection by path suffix.

Two questions are answered here:

- ``kind_of``: which extractor family a path needs (zip, tar or none).
- ``looks_like_archive``: whether a URL path should go through the
  download-to-temp-then-extract flow at all.

They differ on purpose: ``.gz`` and ``.bz2`` alone are single-stream
compressions, so their kind is ``NONE``, yet they still look like archives.
"""

import re
from enum import Enum

from dpp_http.constants import (
    ARCHIVE_EXTENSIONS,
    RAW_GITHUB_HOST,
    TAR_EXTENSIONS,
    ZIP_EXTENSIONS,
)

_HEX_REF_RE = re.compile(r"-[0-9a-f]{7,40}$", re.IGNORECASE)


class ArchiveKind(Enum):
    """Extractor family for a downloaded artifact."""

    NONE = "none"
    ZIP = "zip"
    TAR = "tar"


def matching_extension(name: str) -> str | None:
    """Return the archive extension ``name`` ends with, longest match first.

    Examples:
        >>> matching_extension("asset.tar.gz")
        '.tar.gz'
        >>> matching_extension("ASSET.ZIP")
        '.zip'
        >>> matching_extension("plugin.vim") is None
        True
    """
    lower = name.lower()
    for ext in ARCHIVE_EXTENSIONS:
        if lower.endswith(ext):
            return ext
    return None


def kind_of(path: str) -> ArchiveKind:
    """Classify a path by its archive suffix.

    Examples:
        >>> kind_of("asset.tar.gz")
        <ArchiveKind.TAR: 'tar'>
        >>> kind_of("asset.gz")
        <ArchiveKind.NONE: 'none'>
    """
    ext = matching_extension(path)
    if ext in ZIP_EXTENSIONS:
        return ArchiveKind.ZIP
    if ext in TAR_EXTENSIONS:
        return ArchiveKind.TAR
    return ArchiveKind.NONE


def _segments(path: str) -> list[str]:
    return [seg for seg in path.split("/") if seg]


def marker_index(segments: list[str], host: str = "") -> int | None:
    """Locate the structural archive marker in path segments.

    Matches ``archive`` on any host, ``get`` on bitbucket.org and
    ``releases`` together with ``download`` on github.com. A github.com path
    whose ``raw`` segment comes before the marker is a raw file, not an
    archive.

    Returns:
        Index of the earliest marker segment, or None

    Examples:
        >>> marker_index(["o", "r", "archive", "main.zip"])
        2
        >>> marker_index(["o", "r", "get", "c6be9c9"], host="bitbucket.org")
        2
        >>> marker_index(["o", "r", "get", "c6be9c9"]) is None
        True
        >>> marker_index(["o", "r", "raw", "main", "archive", "f.vim"], host="github.com") is None
        True
    """
    host = host.lower()
    found = []
    if "archive" in segments:
        found.append(segments.index("archive"))
    if "bitbucket.org" in host and "get" in segments:
        found.append(segments.index("get"))
    if "github.com" in host and "releases" in segments and "download" in segments:
        found.append(segments.index("releases"))
    if not found:
        return None

    idx = min(found)
    if "github.com" in host and "raw" in segments[:idx]:
        return None
    return idx


def has_archive_marker(segments: list[str], host: str = "") -> bool:
    """Check for a structural archive marker (see ``marker_index``)."""
    return marker_index(segments, host) is not None


def looks_like_archive(path: str, host: str = "") -> bool:
    """Decide whether a URL path needs the extract flow.

    Args:
        path: URL path component
        host: URL host; raw.githubusercontent.com paths are judged by
            extension only, and the host ties ``get`` and ``releases`` markers
            to their forges

    Returns:
        True if the path carries an archive extension or marker
    """
    if matching_extension(path) is not None:
        return True
    if host.lower() == RAW_GITHUB_HOST:
        return False
    return has_archive_marker(_segments(path), host)


def strip_extension(name: str) -> str:
    """Remove an archive extension as one unit, else the last ``.suffix``.

    A leading dot (``.vimrc``) is not treated as an extension.

    Examples:
        >>> strip_extension("bar-main.tar.gz")
        'bar-main'
        >>> strip_extension("candy.vim")
        'candy'
        >>> strip_extension(".vimrc")
        '.vimrc'
    """
    ext = matching_extension(name)
    if ext is not None:
        return name[: -len(ext)]
    i = name.rfind(".")
    return name[:i] if i > 0 else name


def strip_hex_ref(name: str) -> str:
    """Remove a trailing ``-<7..40 hex chars>`` commit reference.

    Examples:
        >>> strip_hex_ref("mylib-abcdef1234567")
        'mylib'
        >>> strip_hex_ref("mylib-main")
        'mylib-main'
    """
    return _HEX_REF_RE.sub("", name)
