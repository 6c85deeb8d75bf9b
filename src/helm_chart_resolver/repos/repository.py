"""Chart repository handle backed by a cached Helm index."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from pydantic import AnyUrl, TypeAdapter, ValidationError

from helm_chart_resolver.core.files import FileService
from helm_chart_resolver.errors import ChartResolverError, MalformedUrlError
from helm_chart_resolver.repos.base import ChartDescriptor, ChartResolver

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


def parse_repository_url(url: object) -> str:
    """Validate a repository url.

    Args:
        url: Raw url value from configuration.

    Returns:
        The url as a string.

    Raises:
        MalformedUrlError: If the url is missing or not a valid URI.
    """
    if not isinstance(url, str):
        raise MalformedUrlError(url, "expected a string")
    try:
        _url_adapter.validate_python(url)
    except ValidationError as e:
        raise MalformedUrlError(url, e.errors()[0]["msg"]) from e
    return url


@dataclass(frozen=True)
class ChartRepository(ChartResolver):
    """A named Helm chart repository and its local cache locations.

    Equality and hashing cover the name, url and paths, so two handles
    built from the same repositories.yaml entry are interchangeable.
    """

    name: str
    url: str
    archive_cache_dir: Path
    index_cache_dir: Path
    cached_index_path: Path
    files: FileService = field(default_factory=FileService, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Repository name must be a non-empty string")
        if "/" in self.name:
            raise ValueError(f"Repository name must not contain '/': {self.name}")
        parse_repository_url(self.url)

        for attr in ("archive_cache_dir", "index_cache_dir"):
            path = Path(getattr(self, attr))
            if not path.is_absolute():
                raise ValueError(f"{attr} must be absolute: {path}")
            object.__setattr__(self, attr, path)

        cached_index_path = Path(self.cached_index_path)
        if not cached_index_path.is_absolute():
            cached_index_path = self.index_cache_dir / cached_index_path
        object.__setattr__(self, "cached_index_path", cached_index_path)

    def resolve(self, chart_name: str, chart_version: str | None = None) -> ChartDescriptor | None:
        """Resolve a chart version from the cached index.

        Args:
            chart_name: Chart name within this repository.
            chart_version: Version to select; None selects the newest.

        Returns:
            Descriptor for the matching chart version.

        Raises:
            ChartResolverError: If the index is unusable or has no such chart version.
        """
        entries = self._load_entries()

        versions = entries.get(chart_name)
        if not versions:
            raise ChartResolverError(f"Chart not found in repository {self.name}: {chart_name}")
        if not isinstance(versions, list) or not all(isinstance(v, dict) for v in versions):
            raise ChartResolverError(
                f"Index for repository {self.name} has invalid entries for chart {chart_name}"
            )

        entry = self._select_version(versions, chart_version)
        if entry is None:
            raise ChartResolverError(
                f"Version {chart_version} of chart {chart_name} not found in repository {self.name}"
            )

        logger.debug(f"Resolved {self.name}/{chart_name} to version {entry.get('version')}")
        return self._to_descriptor(chart_name, entry)

    def _load_entries(self) -> dict[str, Any]:
        """Read the entries mapping of the cached index."""
        try:
            index = self.files.read_yaml(self.cached_index_path, raw_scalars=True)
        except FileNotFoundError as e:
            raise ChartResolverError(
                f"Index for repository {self.name} not cached at {self.cached_index_path}"
            ) from e
        except ValueError as e:
            raise ChartResolverError(f"Unreadable index for repository {self.name}: {e}") from e

        entries = index.get("entries") or {}
        if not isinstance(entries, dict):
            raise ChartResolverError(f"Index for repository {self.name} has invalid entries")
        return entries

    def _select_version(
        self, versions: list[dict[str, Any]], chart_version: str | None
    ) -> dict[str, Any] | None:
        """Pick an index entry; Helm writes entries newest first."""
        if chart_version is None:
            return versions[0]

        wanted = chart_version.removeprefix("v")
        for entry in versions:
            if str(entry.get("version", "")).removeprefix("v") == wanted:
                return entry
        return None

    def _to_descriptor(self, chart_name: str, entry: dict[str, Any]) -> ChartDescriptor:
        urls = entry.get("urls") or []
        if not isinstance(urls, list):
            raise ChartResolverError(
                f"Index for repository {self.name} has invalid urls for chart {chart_name}"
            )

        base_url = self.url if self.url.endswith("/") else self.url + "/"
        return ChartDescriptor(
            name=str(entry.get("name") or chart_name),
            version=str(entry.get("version", "")),
            urls=tuple(urljoin(base_url, str(url)) for url in urls),
            digest=entry.get("digest") or None,
            app_version=entry.get("appVersion") or None,
            description=str(entry.get("description", "")),
            repository=self.name,
        )
