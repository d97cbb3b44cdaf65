"""Data models for FlatWiki."""

from pydantic import BaseModel


class Page(BaseModel):
    """Represents a wiki page."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    @property
    def display_title(self) -> str:
        """Title with underscores shown as spaces."""
        return self.title.replace("_", " ")
