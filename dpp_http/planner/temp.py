"""Temporary path allocation for archive plans.

Paths are only minted here, never created; the executor creates and removes
them. The temp root is resolved in this order:

1. an explicit ``root`` (from configuration)
2. ``DPP_HTTP_TMPDIR``
3. ``TMPDIR``, ``TEMP``, ``TMP``
4. the system temp root (``tempfile.gettempdir``)
5. ``/tmp`` when no system temp directory is usable
"""

import itertools
import logging
import os
import posixpath
import tempfile
import time
import uuid
from collections.abc import Mapping
from dataclasses import dataclass

from dpp_http.constants import TEMP_PREFIX

logger = logging.getLogger(__name__)

TEMP_ENV_OVERRIDE = "DPP_HTTP_TMPDIR"
SYSTEM_TEMP_VARS = ("TMPDIR", "TEMP", "TMP")
DEFAULT_TEMP_ROOT = "/tmp"

_fallback_counter = itertools.count()


@dataclass(frozen=True)
class TempPaths:
    """A download target and an extraction staging directory."""

    file: str
    directory: str


def _unique_token() -> str:
    try:
        return uuid.uuid4().hex
    except Exception as e:
        logger.debug("uuid4 unavailable, using synthetic token: %s", e)
        return f"{os.getpid()}-{time.time_ns()}-{next(_fallback_counter)}"


class TempPathProvider:
    """Mints collision-free temporary paths.

    Each call to ``allocate`` returns fresh names, so concurrent plans never
    share a temp file or staging directory.
    """

    def __init__(
        self,
        root: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            root: Temp root that takes precedence over the environment
            environ: Environment to read (defaults to os.environ)
        """
        self._root = root
        self._environ = environ if environ is not None else os.environ

    @property
    def root(self) -> str:
        """Resolve the temp root directory."""
        if self._root:
            return self._root
        for var in (TEMP_ENV_OVERRIDE, *SYSTEM_TEMP_VARS):
            value = self._environ.get(var)
            if value:
                return value
        try:
            return tempfile.gettempdir()
        except OSError as e:
            logger.debug("No usable system temp directory: %s", e)
            return DEFAULT_TEMP_ROOT

    def allocate(self, suffix: str = "") -> TempPaths:
        """Allocate a temp file path and a staging directory path.

        Args:
            suffix: Extension for the temp file (e.g. ".tar.gz")

        Returns:
            TempPaths sharing one unique token
        """
        token = _unique_token()
        root = self.root
        return TempPaths(
            file=posixpath.join(root, f"{TEMP_PREFIX}{token}{suffix}"),
            directory=posixpath.join(root, f"{TEMP_PREFIX}{token}-extract"),
        )
