"""Alias resolution errors."""


class AliasError(ValueError):
    """Base class for failures while loading or resolving aliases."""


class AliasParseError(AliasError):
    """Raised when an aliases document is not an object of plain strings."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse aliases file {path}: {detail}")


class UnknownVariableError(AliasError):
    """Raised when ${name} is neither an alias nor an environment variable."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown variable: ${{{name}}}")


class InvalidSyntaxError(AliasError):
    """Raised when a ${ token has no closing brace."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unterminated variable reference in {value!r}")


class MaxDepthExceededError(AliasError):
    """Raised when nested references go deeper than the resolution limit."""

    def __init__(self, value: str, max_depth: int):
        self.value = value
        self.max_depth = max_depth
        super().__init__(f"Variable resolution exceeded maximum depth of {max_depth} while resolving {value!r}")
