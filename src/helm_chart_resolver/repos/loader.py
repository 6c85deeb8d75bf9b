"""Loader for Helm repositories.yaml documents."""

import logging
from pathlib import Path
from typing import IO, Any

from helm_chart_resolver.core.files import FileService
from helm_chart_resolver.errors import (
    CacheDirectoryError,
    InvalidConfigurationError,
    MissingFieldError,
)
from helm_chart_resolver.repos.registry import ChartRepositoryRegistry
from helm_chart_resolver.repos.repository import ChartRepository
from helm_chart_resolver.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def load_helm_repositories_yaml(settings: Settings | None = None) -> ChartRepositoryRegistry:
    """Load the repositories.yaml found under the Helm home.

    Args:
        settings: Settings supplying the Helm home; defaults to the global settings.

    Returns:
        Registry of the configured repositories.

    Raises:
        OSError: If the file cannot be opened or read.
        InvalidConfigurationError: If the document is invalid.
        CacheDirectoryError: If a default cache directory is missing.
    """
    settings = settings or get_settings()
    config_path = settings.repositories_file
    logger.info(f"Loading repositories from: {config_path}")

    with config_path.open("rb") as stream:
        return load_repositories(stream, settings=settings)


def load_repositories(
    stream: IO[str] | IO[bytes] | str,
    archive_cache_dir: Path | None = None,
    index_cache_dir: Path | None = None,
    *,
    settings: Settings | None = None,
    files: FileService | None = None,
) -> ChartRepositoryRegistry:
    """Load a registry from a repositories.yaml document.

    Args:
        stream: Stream (or string) holding the document.
        archive_cache_dir: Directory for chart archives; defaults to
            <helm home>/cache/archive.
        index_cache_dir: Directory relative index paths resolve against;
            defaults to <helm home>/repository/cache.
        settings: Settings supplying the Helm home for the defaults.
        files: File service used to parse the document.

    Returns:
        Registry holding one repository per entry, in document order.

    Raises:
        CacheDirectoryError: If a cache directory does not exist.
        InvalidConfigurationError: If the document or one of its entries is invalid.
        DuplicateRepositoryError: If two entries share a name.
    """
    if archive_cache_dir is None or index_cache_dir is None:
        settings = settings or get_settings()

    if archive_cache_dir is None:
        archive_cache_dir = settings.archive_cache_dir
    archive_cache_dir = Path(archive_cache_dir)
    if not archive_cache_dir.is_dir():
        raise CacheDirectoryError("Archive", archive_cache_dir)

    if index_cache_dir is None:
        index_cache_dir = settings.index_cache_dir
    index_cache_dir = Path(index_cache_dir)
    if not index_cache_dir.is_dir():
        raise CacheDirectoryError("Index", index_cache_dir)

    files = files or FileService()
    try:
        data = files.load_yaml(stream)
    except ValueError as e:
        raise InvalidConfigurationError(f"Invalid repositories document: {e}") from e

    if not data:
        raise InvalidConfigurationError("No data readable from repositories document")
    if not isinstance(data, dict):
        raise InvalidConfigurationError("Invalid config: document must be a mapping")

    repos_data = data.get("repositories") or []
    if not isinstance(repos_data, list):
        raise InvalidConfigurationError("Invalid config: 'repositories' must be a list")

    repositories = []
    for index, repo_data in enumerate(repos_data):
        if not repo_data:
            logger.debug(f"Skipping empty repository entry {index}")
            continue
        repositories.append(_load_repo(index, repo_data, archive_cache_dir, index_cache_dir))

    registry = ChartRepositoryRegistry(repositories)
    logger.info(f"Loaded {len(registry)} repositories")
    return registry


def _load_repo(
    index: int,
    repo_data: Any,
    archive_cache_dir: Path,
    index_cache_dir: Path,
) -> ChartRepository:
    """Build a repository handle from one config entry."""
    if not isinstance(repo_data, dict):
        raise InvalidConfigurationError(f"Repository entry {index} must be a mapping")

    for field in ("name", "cache"):
        if repo_data.get(field) is None:
            raise MissingFieldError(field, index)

    # Plain str drops ruamel's quoted-scalar subclasses
    name = str(repo_data["name"])
    url = repo_data.get("url")
    url = str(url) if isinstance(url, str) else url
    cache = Path(str(repo_data["cache"]))
    if not cache.is_absolute():
        cache = index_cache_dir / cache

    try:
        repo = ChartRepository(
            name=name,
            url=url,
            archive_cache_dir=archive_cache_dir.absolute(),
            index_cache_dir=index_cache_dir.absolute(),
            cached_index_path=cache.absolute(),
        )
    except InvalidConfigurationError:
        raise
    except ValueError as e:
        raise InvalidConfigurationError(f"Repository entry {index} is invalid: {e}") from e

    logger.debug(f"Loaded repo: {repo.name} ({repo.url})")
    return repo
