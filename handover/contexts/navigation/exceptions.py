"""Custom exceptions for the navigation context."""

from pathlib import Path
from typing import Iterable, Optional


class CatalogConfigError(ValueError):
    """
    Exception raised when a section catalog configuration is invalid.

    Raised only while a catalog is being built (from YAML or in code). Once a
    catalog exists, every read against it is total.

    Attributes:
        message: Error description
        config_path: Path to the catalog file being loaded (if any)
        entry: The offending section entry or value (if any)
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        entry: Optional[object] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.entry = entry

        # Build enhanced error message
        parts = [message]

        if config_path:
            parts.append(f"\nCatalog file: {config_path}")

        if entry is not None:
            # Truncate entry if too long
            text = str(entry)
            snippet = text[:200] + "..." if len(text) > 200 else text
            parts.append(f"Entry: {snippet}")

        super().__init__("\n".join(parts))


class UnknownSectionError(KeyError):
    """
    Exception raised when a section id outside the catalog is referenced.

    This is a programming error at the boundary (a bad CLI argument, a stale
    config), never a normal navigation outcome.

    Attributes:
        section_id: The rejected id as given
        available: Ids that would have been accepted
    """

    def __init__(self, section_id: object, available: Iterable[object] = ()):
        self.section_id = section_id
        self.available = [getattr(item, "value", item) for item in available]

        message = f"Unknown section '{getattr(section_id, 'value', section_id)}'"
        if self.available:
            message += f". Available sections: {self.available}"
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message
