"""Chart repositories - repository handles, registry and loader."""

from helm_chart_resolver.repos.base import ChartDescriptor, ChartResolver
from helm_chart_resolver.repos.loader import load_helm_repositories_yaml, load_repositories
from helm_chart_resolver.repos.registry import ChartRepositoryRegistry, split_chart_reference
from helm_chart_resolver.repos.repository import ChartRepository, parse_repository_url

__all__ = [
    "ChartDescriptor",
    "ChartRepository",
    "ChartRepositoryRegistry",
    "ChartResolver",
    "load_helm_repositories_yaml",
    "load_repositories",
    "parse_repository_url",
    "split_chart_reference",
]
