"""Layered alias namespace with ${name} interpolation."""

import json
import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from ...constants import MAX_FILE_SIZE, MAX_RESOLUTION_DEPTH
from ...utils.get_logger import get_logger
from .AliasError import AliasParseError, InvalidSyntaxError, MaxDepthExceededError, UnknownVariableError
from .get_builtins import get_builtins

logger = get_logger("alias.Aliases")


class Aliases:
    """Named string values that other strings reference as ``${name}``.

    The namespace is seeded with the built-ins, then user aliases are added
    on top (last write wins). References that miss the namespace fall back to
    the environment. Call resolve_all() once after loading so every stored
    value is fully expanded.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        hostname: str | None = None,
        builtins: bool = True,
    ):
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.values: dict[str, str] = get_builtins(self.environ, hostname) if builtins else {}

    @classmethod
    def load(
        cls,
        path: str | Path,
        environ: Mapping[str, str] | None = None,
        hostname: str | None = None,
    ) -> "Aliases":
        """Load aliases from a JSON object file and resolve them.

        A missing file yields a namespace holding only the built-ins.

        Raises:
            AliasParseError: If the file is not a JSON object of strings
            AliasError: If an alias value cannot be resolved
        """
        aliases = cls(environ=environ, hostname=hostname)
        aliases.update(read_aliases_file(path))
        aliases.resolve_all()
        return aliases

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __getitem__(self, name: str) -> str:
        return self.values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.values.get(name, default)

    def set(self, name: str, value: str) -> None:
        """Store a raw (unresolved) alias value."""
        self.values[name] = value

    def update(self, values: Mapping[str, str]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def to_dict(self) -> dict[str, str]:
        return dict(self.values)

    def resolve_all(self) -> None:
        """Replace every alias value by its fully resolved form.

        Each value is resolved independently, so key order does not matter.
        """
        for name in list(self.values):
            self.values[name] = self._resolve_value(self.values[name], 0)
        logger.debug(f"Resolved {len(self.values)} aliases")

    def interpolate(self, value: str) -> str:
        """Substitute every ${name} reference in value.

        ``$name`` without braces is literal.

        Raises:
            InvalidSyntaxError: A ``${`` has no closing ``}``
            UnknownVariableError: A name is neither an alias nor set in the environment
            MaxDepthExceededError: References nest deeper than MAX_RESOLUTION_DEPTH
        """
        return self._resolve_value(value, 0)

    def _resolve_value(self, value: str, depth: int) -> str:
        if depth >= MAX_RESOLUTION_DEPTH:
            raise MaxDepthExceededError(value, MAX_RESOLUTION_DEPTH)

        parts: list[str] = []
        i = 0
        while i < len(value):
            if value.startswith("${", i):
                end = value.find("}", i + 2)
                if end == -1:
                    raise InvalidSyntaxError(value)
                parts.append(self._lookup(value[i + 2 : end], depth + 1))
                i = end + 1
            else:
                parts.append(value[i])
                i += 1
        return "".join(parts)

    def _lookup(self, name: str, depth: int) -> str:
        # Aliases first (resolved recursively), then the environment (taken literally)
        if name in self.values:
            return self._resolve_value(self.values[name], depth)
        env_value = self.environ.get(name)
        if env_value is not None:
            return env_value
        raise UnknownVariableError(name)


def read_aliases_file(path: str | Path) -> dict[str, str]:
    """Read raw alias definitions from a JSON file; {} if the file does not exist."""
    path = Path(path)
    try:
        with path.open("rb") as fh:
            content = fh.read(MAX_FILE_SIZE + 1)
    except FileNotFoundError:
        logger.debug(f"No aliases file at {path}")
        return {}
    if len(content) > MAX_FILE_SIZE:
        raise AliasParseError(str(path), f"file exceeds {MAX_FILE_SIZE} bytes")

    try:
        raw = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise AliasParseError(str(path), str(e)) from e

    if not isinstance(raw, dict):
        raise AliasParseError(str(path), "expected a JSON object")
    for name, value in raw.items():
        if not isinstance(value, str):
            raise AliasParseError(str(path), f"value of {name!r} is not a string")
    return raw
