"""
Named-resource lookup for deck documents.

A provider maps a resource name to its raw bytes, or None when the resource
does not exist or cannot be read. Absence is an expected outcome.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)

DATA_PACKAGE = "cardflip"
DATA_DIR = "data"


@runtime_checkable
class ResourceProvider(Protocol):
    """Synchronous lookup of a named resource."""

    def load_bytes(self, name: str) -> Optional[bytes]:
        ...


class PackageResourceProvider:
    """Resources bundled in the package `data` directory."""

    def __init__(self, package: str = DATA_PACKAGE, directory: str = DATA_DIR):
        self.package = package
        self.directory = directory

    def load_bytes(self, name: str) -> Optional[bytes]:
        try:
            resource = (
                resources.files(self.package)
                .joinpath(self.directory)
                .joinpath(name)
            )
            if not resource.is_file():
                logger.debug(f"Bundled resource '{name}' not found.")
                return None
            return resource.read_bytes()
        except (ModuleNotFoundError, OSError) as e:
            logger.warning(f"Could not read bundled resource '{name}': {e}")
            return None


class DirectoryResourceProvider:
    """Resources stored as files under a directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def load_bytes(self, name: str) -> Optional[bytes]:
        path = self.root / name
        if not path.is_file():
            logger.debug(f"Resource file '{path}' not found.")
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.warning(f"Could not read resource file '{path}': {e}")
            return None


def provider_for_path(deck_path: Path) -> Tuple[DirectoryResourceProvider, str]:
    """Split a deck file path into a directory provider and resource name."""
    deck_path = Path(deck_path)
    return DirectoryResourceProvider(deck_path.parent), deck_path.name
