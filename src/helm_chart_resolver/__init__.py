"""Helm Chart Resolver - route "repo/chart" references to configured Helm repositories."""

from helm_chart_resolver.errors import (
    CacheDirectoryError,
    ChartResolverError,
    DuplicateRepositoryError,
    InvalidConfigurationError,
    MalformedUrlError,
    MissingFieldError,
)
from helm_chart_resolver.repos import (
    ChartDescriptor,
    ChartRepository,
    ChartRepositoryRegistry,
    ChartResolver,
    load_helm_repositories_yaml,
    load_repositories,
)
from helm_chart_resolver.settings import Settings, configure_logging, get_settings

__all__ = [
    "CacheDirectoryError",
    "ChartDescriptor",
    "ChartRepository",
    "ChartRepositoryRegistry",
    "ChartResolver",
    "ChartResolverError",
    "DuplicateRepositoryError",
    "InvalidConfigurationError",
    "MalformedUrlError",
    "MissingFieldError",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_helm_repositories_yaml",
    "load_repositories",
]
