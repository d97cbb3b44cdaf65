"""Page title parsing and validation."""

import re

from flatwiki.core.errors import InvalidTitleError

# Path-parameterized routes, matched against the whole path; group 2 is the title.
VALID_PATH = re.compile(r"/(edit|save|view|delete)/([A-Za-z0-9_-]+)")

TITLE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

MAX_TITLE_LENGTH = 200


def match_title(path: str) -> str | None:
    """Extract the page title from a request path.

    Returns None when the path is not one of the title-carrying routes or
    the title contains characters outside the allow-list.
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return m.group(2)


def validate_title(title: str) -> str:
    """Return ``title`` unchanged if it is a safe page identifier.

    Raises:
        InvalidTitleError: if the title is empty, too long, or contains
            anything besides letters, digits, hyphen and underscore.
    """
    if not title:
        raise InvalidTitleError(title, "title is empty")
    if len(title) > MAX_TITLE_LENGTH:
        raise InvalidTitleError(
            title, f"title is longer than {MAX_TITLE_LENGTH} characters"
        )
    if TITLE_PATTERN.fullmatch(title) is None:
        raise InvalidTitleError(
            title, "only letters, digits, '-' and '_' are allowed"
        )
    return title


def normalize_title(raw: str) -> str:
    """Convert user input into a page title.

    Spaces become underscores; the result must then pass validate_title.
    """
    return validate_title(raw.replace(" ", "_"))
