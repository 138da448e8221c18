"""
Command registry: the single source of truth for which commands exist.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable

from file_manager.entities.cursor import WorkingDirectoryCursor
from file_manager.exceptions import InvalidInputError

Handler = Callable[..., None]


@dataclass(frozen=True)
class CommandSpec:
    """Specification for one shell command.

    ``params`` name the required positional arguments in order, ``optional``
    the ones that may follow them. The handler is called as
    ``handler(cursor, *args)``.
    """

    name: str
    handler: Handler
    params: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    def accepts(self, argc: int) -> bool:
        return len(self.params) <= argc <= len(self.params) + len(self.optional)

    def usage(self) -> str:
        parts = [self.name, *self.params, *(f"[{p}]" for p in self.optional)]
        return " ".join(parts)


class CommandTable:
    """Immutable name -> CommandSpec mapping with arity-checked dispatch."""

    def __init__(self, specs: Iterable[CommandSpec]) -> None:
        table: dict[str, CommandSpec] = {}
        for spec in specs:
            if spec.name in table:
                raise ValueError(f"Duplicate command: {spec.name}")
            table[spec.name] = spec
        self._specs = MappingProxyType(table)

    def lookup(self, name: str) -> CommandSpec:
        """
        Find a command by exact name.

        Raises:
            InvalidInputError: If no command has this name
        """
        spec = self._specs.get(name)
        if spec is None:
            raise InvalidInputError(f"Unknown command: {name}")
        return spec

    def dispatch(self, cursor: WorkingDirectoryCursor, name: str, args: list[str]) -> None:
        """
        Validate the arguments and invoke the handler.

        Raises:
            InvalidInputError: If the command is unknown or the argument count is wrong
        """
        spec = self.lookup(name)
        if not spec.accepts(len(args)):
            raise InvalidInputError(f"Usage: {spec.usage()}")
        spec.handler(cursor, *args)
