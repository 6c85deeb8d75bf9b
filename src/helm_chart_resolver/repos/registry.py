"""Registry of named chart repositories."""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import IO, TYPE_CHECKING

from helm_chart_resolver.errors import DuplicateRepositoryError
from helm_chart_resolver.repos.base import ChartDescriptor, ChartResolver
from helm_chart_resolver.repos.repository import ChartRepository

if TYPE_CHECKING:
    from pathlib import Path

    from helm_chart_resolver.settings import Settings

logger = logging.getLogger(__name__)


def split_chart_reference(chart_reference: str) -> tuple[str, str] | None:
    """Split "repo/chart" into its repository and chart names.

    Returns None unless the reference splits on its first "/" into two
    non-empty parts.
    """
    parts = chart_reference.split("/", 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


class ChartRepositoryRegistry(ChartResolver):
    """Immutable registry of chart repositories keyed by name.

    Resolves compound "repo/chart" references by routing them to the
    named repository.
    """

    def __init__(self, repositories: Iterable[ChartRepository] | None = None) -> None:
        """Initialize the registry.

        Args:
            repositories: Repository handles, in lookup order. Equal handles
                collapse into one.

        Raises:
            DuplicateRepositoryError: If two different handles share a name.
        """
        repos: dict[str, ChartRepository] = {}
        for repo in repositories or ():
            existing = repos.get(repo.name)
            if existing is not None:
                if existing == repo:
                    continue
                raise DuplicateRepositoryError(repo.name)
            repos[repo.name] = repo
        self._repos = MappingProxyType(repos)

    @classmethod
    def from_yaml(
        cls,
        stream: IO[str] | IO[bytes] | str,
        archive_cache_dir: "Path | None" = None,
        index_cache_dir: "Path | None" = None,
        *,
        settings: "Settings | None" = None,
    ) -> "ChartRepositoryRegistry":
        """Create a registry from a repositories.yaml stream.

        See load_repositories for argument and error details.
        """
        from helm_chart_resolver.repos.loader import load_repositories

        return load_repositories(stream, archive_cache_dir, index_cache_dir, settings=settings)

    @classmethod
    def from_helm_repositories_yaml(
        cls, settings: "Settings | None" = None
    ) -> "ChartRepositoryRegistry":
        """Create a registry from the repositories.yaml under the Helm home."""
        from helm_chart_resolver.repos.loader import load_helm_repositories_yaml

        return load_helm_repositories_yaml(settings)

    @property
    def repositories(self) -> tuple[ChartRepository, ...]:
        """All repositories, in insertion order."""
        return tuple(self._repos.values())

    def list_names(self) -> list[str]:
        """List all repository names."""
        return list(self._repos.keys())

    def get_repository(self, name: str) -> ChartRepository | None:
        """Get a repository by name.

        Args:
            name: Repository name; matched case-sensitively.

        Returns:
            The repository, or None if not found.

        Raises:
            ValueError: If name is None or empty.
        """
        if not name:
            raise ValueError("Repository name must be a non-empty string")
        return self._repos.get(name)

    def resolve(self, chart_name: str, chart_version: str | None = None) -> ChartDescriptor | None:
        """Resolve a "repo/chart" reference.

        Args:
            chart_name: Slash-separated repository and chart name.
            chart_version: Version to select; None selects the newest.

        Returns:
            The chart descriptor, or None if the reference is malformed or
            names no configured repository.

        Raises:
            ValueError: If chart_name is None.
            ChartResolverError: If the named repository fails to resolve the chart.
        """
        if chart_name is None:
            raise ValueError("Chart reference must not be None")

        parts = split_chart_reference(chart_name)
        if parts is None:
            logger.debug(f"Malformed chart reference: {chart_name!r}")
            return None

        repository_name, name = parts
        return self.resolve_in(repository_name, name, chart_version)

    def resolve_in(
        self,
        repository_name: str,
        chart_name: str,
        chart_version: str | None = None,
    ) -> ChartDescriptor | None:
        """Resolve a chart within a named repository.

        Args:
            repository_name: Repository name.
            chart_name: Chart name within that repository.
            chart_version: Version to select; None selects the newest.

        Returns:
            Whatever the repository returns, or None if no repository has
            that name.

        Raises:
            ValueError: If repository_name or chart_name is None.
            ChartResolverError: If the repository fails to resolve the chart.
        """
        if repository_name is None or chart_name is None:
            raise ValueError("Repository name and chart name must not be None")

        repo = self._repos.get(repository_name)
        if repo is None:
            logger.warning(f"No repository named {repository_name!r} is configured")
            return None

        return repo.resolve(chart_name, chart_version)

    def __len__(self) -> int:
        return len(self._repos)

    def __iter__(self) -> Iterator[ChartRepository]:
        return iter(self._repos.values())

    def __contains__(self, name: object) -> bool:
        return name in self._repos

    def __repr__(self) -> str:
        return f"ChartRepositoryRegistry({self.list_names()!r})"
