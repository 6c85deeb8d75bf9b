"""Core services - internal helpers for file operations."""

from helm_chart_resolver.core.files import FileService

__all__ = ["FileService"]
