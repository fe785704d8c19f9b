"""Type definitions for the planner module."""

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class Command:
    """One external command: an executable name and its arguments.

    A description only; nothing in this package runs it.
    """

    command: str
    args: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{"command": ..., "args": [...]}`` record."""
        return {"command": self.command, "args": list(self.args)}

    def argv(self) -> list[str]:
        """Return the full argument vector, executable first."""
        return [self.command, *self.args]


@dataclass
class CommandPlan:
    """Ordered fetch, extract and cleanup commands for one request.

    An empty plan means the request cannot be satisfied with the tools on
    the host. Temp paths are recorded when the archive flow allocated them.
    """

    commands: list[Command] = field(default_factory=list)
    temp_file: str | None = None
    temp_dir: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True if no working command sequence could be built."""
        return not self.commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return not self.is_empty

    @property
    def executables(self) -> list[str]:
        """Executable names in plan order."""
        return [cmd.command for cmd in self.commands]

    def to_list(self) -> list[dict[str, Any]]:
        """Convert to the list of records handed to an executor."""
        return [cmd.to_dict() for cmd in self.commands]
