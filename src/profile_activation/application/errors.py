class VersionRangeError(ValueError):
    pass


class ProfileDefinitionError(ValueError):
    """Raised when a profile definitions document cannot be loaded or validated."""

    def __init__(self, message: str, path: str | None = None, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.details = details or []
