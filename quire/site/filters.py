#!/usr/bin/env python3
"""
filters.py
----------
Custom Jinja2 filters available to page and index templates.

Filters:
    - author_names: Join author names ("Ada, Grace and Linus")
    - mailto: Render an author as a mailto link when a mail is set
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from html import escape
from typing import Any, Dict, List, Mapping


def author_names(authors: List[Mapping[str, Any]], conjunction: str = "and") -> str:
    """
    Join author names into a readable list.

    Blank names are skipped.

    Examples:
        >>> author_names([{"Name": "Ada"}, {"Name": "Grace"}])
        'Ada and Grace'
        >>> author_names([{"Name": "A"}, {"Name": "B"}, {"Name": "C"}])
        'A, B and C'
    """
    names = [str(a.get("Name", "")) for a in authors if a.get("Name")]
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"


def mailto(author: Dict[str, Any]) -> str:
    """
    Render an author name, linked to their mail address if they have one.

    Examples:
        >>> mailto({"Name": "Ada", "Mail": "ada@example.org"})
        '<a href="mailto:ada@example.org">Ada</a>'
        >>> mailto({"Name": "Ada", "Mail": ""})
        'Ada'
    """
    name = escape(str(author.get("Name", "")))
    mail = author.get("Mail")
    if not mail:
        return name
    return f'<a href="mailto:{escape(str(mail))}">{name}</a>'
