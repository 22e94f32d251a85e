"""
Exception hierarchy for code generation.

Every failure the engine reports derives from GeneratorError so callers
can catch the whole family in one place.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class MissingInputError(GeneratorError):
    """Raised when no schema source was supplied."""

    pass


class MalformedSchemaError(GeneratorError):
    """Raised when the raw schema is not valid structured data."""

    pass


class EntityNameError(GeneratorError):
    """Raised for an empty entity name."""

    pass


class FilesystemError(GeneratorError):
    """Raised when a directory or file cannot be created or written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
