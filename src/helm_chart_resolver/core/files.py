"""File operations service for YAML documents."""

from pathlib import Path
from typing import IO, Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError


class FileService:
    """Service for reading Helm YAML documents.

    Uses ruamel.yaml so that mappings keep their document order.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.preserve_quotes = True
        # Keeps every scalar as its source text, so "1.10" stays "1.10"
        self._raw_yaml = YAML(typ="base")

    def load_yaml(
        self, stream: IO[str] | IO[bytes] | str, *, raw_scalars: bool = False
    ) -> Any:
        """Parse a YAML document from a stream or string.

        Args:
            stream: Text or binary stream, or the document itself.
            raw_scalars: Load every scalar as a plain string instead of
                typed values.

        Returns:
            The parsed document; None for an empty document.

        Raises:
            ValueError: If the document cannot be parsed.
        """
        try:
            yaml = self._raw_yaml if raw_scalars else self._yaml
            return yaml.load(stream)
        except YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e

    def read_yaml(self, path: Path, *, raw_scalars: bool = False) -> dict[str, Any]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file.
            raw_scalars: Load every scalar as a plain string.

        Returns:
            Parsed YAML contents as a dictionary.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file cannot be parsed or is not a mapping.
        """
        if not path.exists():
            raise FileNotFoundError(f"YAML file not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            try:
                data = self.load_yaml(f, raw_scalars=raw_scalars)
            except ValueError as e:
                raise ValueError(f"Failed to parse YAML file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"YAML file {path} does not contain a mapping")
        return dict(data)
