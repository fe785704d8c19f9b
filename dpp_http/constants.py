"""Centralized constants for the dpp_http package."""

# Archive extensions, longest first so ".tar.gz" is matched before ".gz"
ARCHIVE_EXTENSIONS = tuple(
    sorted(
        (".zip", ".tar", ".tar.gz", ".tar.bz2", ".tar.xz", ".tgz", ".gz", ".bz2"),
        key=len,
        reverse=True,
    )
)

ZIP_EXTENSIONS = frozenset({".zip"})
TAR_EXTENSIONS = frozenset({".tar", ".tar.gz", ".tgz", ".tar.bz2", ".tar.xz"})

# Hosts with special handling
RAW_GITHUB_HOST = "raw.githubusercontent.com"
FORGE_HOSTS = ("github.com", "gitlab.com", "bitbucket.org")

ACCEPTED_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}

# Directory under the base path where plugins are placed
REPOS_SUBDIR = "repos"

# Tools, in preference order
DOWNLOADERS = ("curl", "wget")
EXTRA_TOOLS = ("unzip", "tar", "python3", "rm", "cp", "rsync")

TEMP_PREFIX = "dpp-http-"
