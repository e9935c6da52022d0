#!/usr/bin/env python3
"""
document.py
-------------------
Records flowing through a site build.

    MetaBlock  - header decoded from a document's leading ```json block
    Page       - what the page template renders (one per document)
    Link       - index entry for a rendered page
    Index      - what the index template renders (one per build)

Templates see capitalized field names (Title, Date, Authors, Content,
Links, Url and Name, Mail, Organization, ORCID for authors); each record's
to_context() produces that mapping.

Header keys are matched case-insensitively, an exact match wins. Missing
or null Title and Authors decode to "" and []; Date is required.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

# --- Local imports ---
from quire.core.exceptions import ValidationError


DATE_FORMAT_LENGTH = 10

# Seconds fraction of any length; fromisoformat wants 3 or 6 digits before 3.11
_SECONDS_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


# ----- Helpers -----
def lookup_field(data: Dict[str, Any], key: str) -> Any:
    """Fetch a key exactly, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None


def _string_field(data: Dict[str, Any], key: str, owner: str) -> str:
    value = lookup_field(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(
            f"{owner}.{key} must be a string, got {type(value).__name__}"
        )
    return value


def parse_date(value: Any) -> date:
    """
    Parse a header date.

    Accepts RFC 3339 timestamps ("2020-01-02T00:00:00Z",
    "2020-01-02T10:00:00+02:00") and plain "YYYY-MM-DD" dates. The calendar
    date is taken as written, without converting to another time zone.

    Raises:
        ValidationError: If the value is not a parseable date string
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"Date must be a string, got {type(value).__name__}"
        )

    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _SECONDS_FRACTION.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text
    )

    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise ValidationError(f"invalid Date {value!r}: {e}") from e


def format_date(value: date) -> str:
    """
    Format a date as YYYY-MM-DD.

    Always zero padded to 10 characters, including years below 1000.

    Examples:
        >>> format_date(date(2020, 1, 2))
        '2020-01-02'
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


# ----- Records -----
@dataclass(frozen=True)
class Author:
    """A document author."""

    name: str = ""
    mail: str = ""
    organization: str = ""
    orcid: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Author:
        """
        Decode an author object.

        Raises:
            ValidationError: If data is not an object or a field is not a string
        """
        if not isinstance(data, dict):
            raise ValidationError(
                f"author must be an object, got {type(data).__name__}"
            )
        return cls(
            name=_string_field(data, "Name", "Author"),
            mail=_string_field(data, "Mail", "Author"),
            organization=_string_field(data, "Organization", "Author"),
            orcid=_string_field(data, "ORCID", "Author"),
        )

    def to_context(self) -> Dict[str, str]:
        return {
            "Name": self.name,
            "Mail": self.mail,
            "Organization": self.organization,
            "ORCID": self.orcid,
        }


@dataclass
class MetaBlock:
    """
    Header embedded at the start of a document.

    Attributes:
        title: Document title
        date: Publication date
        authors: Ordered list of authors
    """

    title: str
    date: date
    authors: List[Author] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MetaBlock:
        """
        Decode and validate a header object.

        Args:
            data: Value decoded from the header JSON

        Returns:
            Parsed MetaBlock

        Raises:
            ValidationError: If the header does not have the expected shape

        Examples:
            >>> MetaBlock.from_dict({"Title": "Hi", "Date": "2020-01-02"}).title
            'Hi'
        """
        if not isinstance(data, dict):
            raise ValidationError(
                f"meta block must be an object, got {type(data).__name__}"
            )

        title = _string_field(data, "Title", "MetaBlock")

        raw_date = lookup_field(data, "Date")
        if raw_date is None:
            raise ValidationError("missing required field 'Date'")

        raw_authors = lookup_field(data, "Authors")
        if raw_authors is None:
            raw_authors = []
        if not isinstance(raw_authors, list):
            raise ValidationError(
                f"Authors must be a list, got {type(raw_authors).__name__}"
            )

        return cls(
            title=title,
            date=parse_date(raw_date),
            authors=[Author.from_dict(item) for item in raw_authors],
        )


@dataclass
class Page:
    """
    A rendered document, ready for the page template.

    Attributes:
        title: Title from the header
        date: Header date formatted as YYYY-MM-DD
        authors: Authors from the header
        content: Body rendered to HTML
    """

    title: str
    date: str
    authors: List[Author]
    content: str

    @classmethod
    def from_meta(cls, meta: MetaBlock, content: str) -> Page:
        return cls(
            title=meta.title,
            date=format_date(meta.date),
            authors=list(meta.authors),
            content=content,
        )

    def to_context(self) -> Dict[str, Any]:
        return {
            "Title": self.title,
            "Date": self.date,
            "Authors": [author.to_context() for author in self.authors],
            "Content": self.content,
        }


@dataclass(frozen=True)
class Link:
    """Index entry pointing at a rendered page."""

    title: str
    date: str
    url: str

    @classmethod
    def for_page(cls, page: Page, html_name: str) -> Link:
        """Build the link for a page written as ``html_name`` at the site root."""
        return cls(title=page.title, date=page.date, url=f"/{html_name}")

    def to_context(self) -> Dict[str, str]:
        return {"Title": self.title, "Date": self.date, "Url": self.url}


@dataclass
class Index:
    """Links of every rendered page, in processing order."""

    links: List[Link] = field(default_factory=list)

    def add(self, link: Link) -> None:
        self.links.append(link)

    def to_context(self) -> Dict[str, Any]:
        return {"Links": [link.to_context() for link in self.links]}

    def __len__(self) -> int:
        return len(self.links)

