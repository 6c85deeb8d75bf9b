"""Exceptions raised while loading repositories and resolving charts."""


class ChartResolverError(Exception):
    """Exception raised when a repository cannot resolve a chart."""

    pass


class InvalidConfigurationError(ValueError):
    """Exception raised for an unusable repositories document."""

    pass


class MissingFieldError(InvalidConfigurationError):
    """A repository entry lacks a required field."""

    def __init__(self, field: str, entry_index: int) -> None:
        super().__init__(f"Repository entry {entry_index} missing required field: {field}")
        self.field = field
        self.entry_index = entry_index


class MalformedUrlError(InvalidConfigurationError):
    """A repository entry carries a url that is not a valid URI."""

    def __init__(self, url: object, reason: str) -> None:
        super().__init__(f"Invalid repository url {url!r}: {reason}")
        self.url = url


class CacheDirectoryError(ValueError):
    """A cache directory does not exist."""

    def __init__(self, kind: str, path: object) -> None:
        super().__init__(f"{kind} cache directory is not a directory: {path}")
        self.kind = kind
        self.path = path


class DuplicateRepositoryError(ValueError):
    """Two different repositories share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate repository name: {name}")
        self.name = name
