#!/usr/bin/env python3
"""
__init__.py
-----------
Site rendering with Jinja2 templates.

Components:
    - SiteRenderer: executes page and index templates
    - filters: custom template filters
"""
from .renderer import SiteRenderer

__all__ = ["SiteRenderer"]
