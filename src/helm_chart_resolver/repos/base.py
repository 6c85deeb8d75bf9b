"""Base resolver class defining the interface for chart sources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChartDescriptor:
    """A resolved chart version within a repository."""

    name: str
    version: str
    urls: tuple[str, ...] = ()
    digest: str | None = None
    app_version: str | None = None
    description: str = ""
    repository: str | None = field(default=None, compare=False)


class ChartResolver(ABC):
    """Abstract base class for anything that turns a chart name into a chart.

    Implementations return None when they have nothing to offer for the
    chart, and raise ChartResolverError when they own the chart but
    cannot produce the requested version.
    """

    @abstractmethod
    def resolve(self, chart_name: str, chart_version: str | None = None) -> ChartDescriptor | None:
        """Resolve a chart.

        Args:
            chart_name: Chart name.
            chart_version: Version to select; None selects the newest.

        Returns:
            The chart descriptor, or None.

        Raises:
            ChartResolverError: If resolution fails.
        """
        ...
