"""Errors raised by the migration tooling."""


class ArtDbError(Exception):
    """Base class for every error raised by artdb."""


class MigrationError(ArtDbError):
    """A migration could not be loaded, applied or rolled back."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"{name}: {message}")


class UnknownPlaceholderError(ArtDbError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No value configured for placeholder {{#{key}}}")
