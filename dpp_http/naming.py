"""Deterministic local directory names for plugin URLs.

The name is the part after ``<base_path>/repos/``. Forge archives collapse to
``<host>/<owner>/<repo>`` so every branch or tag of a repository shares one
directory; other URLs use their file name without extension or commit hash.

| URL                                                        | Name                          |
|------------------------------------------------------------|-------------------------------|
| github.com/Shougo/dpp-protocol-git/archive/refs/heads/main.zip | github.com/Shougo/dpp-protocol-git |
| gitlab.com/foo/bar/-/archive/main/bar-main.zip             | gitlab.com/foo/bar            |
| raw.githubusercontent.com/Shougo/x/master/colors/candy.vim | candy                         |
| example.com/downloads/mylib-abcdef1234567.zip              | mylib                         |
"""

from urllib.parse import urlsplit

from dpp_http.archive import (
    marker_index,
    matching_extension,
    strip_extension,
    strip_hex_ref,
)
from dpp_http.constants import FORGE_HOSTS, RAW_GITHUB_HOST
from dpp_http.url import CanonicalURL

_GITLAB_SEPARATOR = "-"


def _is_forge(host: str) -> bool:
    return host in FORGE_HOSTS or "git" in host


def _owner_and_repo(segments: list[str], marker: int) -> tuple[str, str]:
    """Split the segments before an archive marker into owner and repository.

    GitLab nests projects in groups and ends the project path with ``/-/``,
    so everything before the segment preceding ``-`` is the owner.
    """
    if segments[marker - 1] == _GITLAB_SEPARATOR and marker >= 3:
        return "/".join(segments[: marker - 2]), segments[marker - 2]
    return segments[marker - 2], segments[marker - 1]


def _strip_git_suffix(repo: str) -> str:
    return repo[: -len(".git")] if repo.endswith(".git") else repo


def _file_stem(segment: str) -> str:
    return strip_hex_ref(strip_extension(segment))


def _fallback_name(spec: str) -> str:
    """Best-effort name for strings that are not URLs."""
    parts = [part for part in spec.split("/") if part]
    if not parts:
        return spec
    last = parts[-1].split("?")[0].split("#")[0]
    return _file_stem(last) or last


def _split(spec: str) -> tuple[str, list[str]] | None:
    try:
        parts = urlsplit(spec)
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None
    return host, [seg for seg in parts.path.split("/") if seg and seg not in (".", "..")]


def directory_name(url: CanonicalURL | str) -> str:
    """Derive the local directory name for a plugin URL.

    Args:
        url: A CanonicalURL, or any string (non-URL input falls back to the
            last path token)

    Returns:
        A non-empty, filesystem-safe relative name

    Examples:
        >>> directory_name("https://bitbucket.org/spilt/vim-peg/get/c6be9c909538.zip")
        'bitbucket.org/spilt/vim-peg'
        >>> directory_name("some/path/to/file.ext")
        'file'
    """
    if isinstance(url, CanonicalURL):
        host, segs = url.host.lower(), list(url.segments)
    else:
        split = _split(url)
        if split is None:
            return _fallback_name(url)
        host, segs = split[0], split[1]

    if host == RAW_GITHUB_HOST and segs:
        return strip_extension(segs[-1]) or host

    marker = marker_index(segs, host)
    if marker is not None and marker >= 2:
        owner, repo = _owner_and_repo(segs, marker)
        return f"{host}/{owner}/{_strip_git_suffix(repo)}"

    # A second segment carrying the archive extension is the file, not a repo.
    if marker is None and _is_forge(host) and len(segs) >= 2:
        if len(segs) > 2 or matching_extension(segs[1]) is None:
            return f"{host}/{segs[0]}/{_strip_git_suffix(segs[1])}"

    if segs:
        return _file_stem(segs[-1]) or host

    return host
