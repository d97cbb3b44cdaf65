"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, StorageError
from flatwiki.core.models import Page
from flatwiki.core.titles import validate_title

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError on any failure."""
        ...

    @abstractmethod
    async def save(self, page: Page) -> None:
        """Create or overwrite a page. Raises StorageError on failure."""
        ...

    @abstractmethod
    async def delete(self, title: str) -> None:
        """Remove a page. Raises StorageError if it cannot be removed."""
        ...

    @abstractmethod
    async def list_titles(self) -> list[str]:
        """List all stored page titles in directory order."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is one file directly inside ``base_path``, named
    ``<title>.txt`` and readable only by the owning user. The body is
    stored as raw bytes with no header or metadata.
    """

    EXTENSION = ".txt"
    FILE_MODE = 0o600

    def __init__(self, base_path: Path, create: bool = False):
        self.base_path = Path(base_path)
        if create:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return validate_title(title) + self.EXTENSION

    def _filename_to_title(self, filename: str) -> str:
        """Convert filename to page title."""
        return filename.removesuffix(self.EXTENSION)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / self._title_to_filename(title)

    async def load(self, title: str) -> Page:
        """Load a page by title."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug("Could not load %s: %s", path, e)
            raise PageNotFoundError(title) from e
        return Page(title=title, body=body)

    async def save(self, page: Page) -> None:
        """Write the page body, replacing any previous content."""
        path = self._get_path(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            logger.error("Failed to save %s: %s", path, e)
            raise StorageError(page.title, e) from e
        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))

    async def delete(self, title: str) -> None:
        """Delete a page."""
        path = self._get_path(title)
        try:
            path.unlink()
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
            raise StorageError(title, e) from e
        logger.info("Deleted page %s", title)

    async def list_titles(self) -> list[str]:
        """List all page titles.

        Only regular files directly inside the pages directory with the
        ``.txt`` suffix count; order is whatever the directory yields.
        """
        titles = []
        try:
            with os.scandir(self.base_path) as entries:
                for entry in entries:
                    if entry.name.endswith(self.EXTENSION) and entry.is_file():
                        titles.append(self._filename_to_title(entry.name))
        except OSError as e:
            logger.warning("Could not list %s: %s", self.base_path, e)
            return []
        return titles
