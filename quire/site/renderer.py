#!/usr/bin/env python3
"""
renderer.py
-----------
Jinja2 template executor for pages and the site index.

Templates are referenced by file path (as given in the configuration).
Each record is passed through its to_context() so templates use the
capitalized field names:

    page template:   {{ Title }} {{ Date }} {{ Content }}
                     {% for author in Authors %}{{ author.Name }}{% endfor %}
    index template:  {% for link in Links %}
                     <a href="{{ link.Url }}">{{ link.Title }}</a> {{ link.Date }}
                     {% endfor %}

Undefined fields are errors (StrictUndefined). Output is not
auto-escaped since Content is already HTML.

Usage:
    from quire.site.renderer import SiteRenderer

    # Production: templates are files
    renderer = SiteRenderer()
    renderer.render_to_file(out_path, Path("templates/page.html"), page)

    # Testing: supply templates as dict
    renderer = SiteRenderer(templates={"page.html": "{{ Title }}"})
    renderer.render(Path("page.html"), page)

Dependencies:
    - jinja2>=3.1.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

# --- Third-party imports ---
from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
)
from jinja2 import TemplateError as JinjaTemplateError

# --- Local imports ---
from quire.core.exceptions import OutputError, TemplateError
from quire.site import filters as site_filters


class TemplateData(Protocol):
    """Anything that can be rendered: Page or Index."""

    def to_context(self) -> Dict[str, Any]: ...


class SiteRenderer:
    """
    Jinja2-based page and index renderer.

    Attributes:
        templates: In-memory templates (tests), or None to load files
    """

    def __init__(self, templates: Optional[Dict[str, str]] = None) -> None:
        """
        Initialize the renderer.

        Args:
            templates: Dict of template_name → template_string; when given,
                template paths are looked up by str(path) in this dict
        """
        self.templates = templates
        self._environments: Dict[str, Environment] = {}

    def _environment(self, loader: BaseLoader) -> Environment:
        env = Environment(
            loader=loader,
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        env.filters["author_names"] = site_filters.author_names
        env.filters["mailto"] = site_filters.mailto
        return env

    def _environment_for(self, template_path: Path) -> Environment:
        if self.templates is not None:
            key = ""
            loader: BaseLoader = DictLoader(self.templates)
        else:
            key = str(template_path.parent)
            loader = FileSystemLoader(key)

        if key not in self._environments:
            self._environments[key] = self._environment(loader)
        return self._environments[key]

    def load(self, template_path: Path) -> Template:
        """
        Load and parse a template.

        Raises:
            TemplateError: If the template is missing, unreadable or invalid
        """
        env = self._environment_for(template_path)
        name = str(template_path) if self.templates is not None else template_path.name
        try:
            return env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateError(f"template not found: {template_path}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"cannot parse template {template_path}: {e}") from e
        except OSError as e:
            raise TemplateError(f"cannot read template {template_path}: {e}") from e

    def render(self, template_path: Path, data: TemplateData) -> str:
        """
        Render a template against a Page or Index.

        Raises:
            TemplateError: If loading or executing the template fails
        """
        template = self.load(template_path)
        try:
            return template.render(**data.to_context())
        except Exception as e:
            raise TemplateError(f"cannot execute template {template_path}: {e}") from e

    def render_to_file(
        self,
        output_path: Path,
        template_path: Path,
        data: TemplateData,
    ) -> None:
        """
        Render a template into a file.

        The output file is created (or truncated) before the template is
        loaded, so a failing template leaves it empty or partially written.
        The file is closed on every path.

        Args:
            output_path: Destination file path
            template_path: Template file path
            data: Page or Index to render

        Raises:
            OutputError: If the output file cannot be created or written
            TemplateError: If loading or executing the template fails
        """
        try:
            handle = output_path.open("w", encoding="utf-8")
        except OSError as e:
            raise OutputError(f"cannot create {output_path}: {e}") from e

        with handle:
            template = self.load(template_path)
            try:
                template.stream(**data.to_context()).dump(handle)
            except OSError as e:
                raise OutputError(f"cannot write {output_path}: {e}") from e
            except Exception as e:
                raise TemplateError(
                    f"cannot execute template {template_path}: {e}"
                ) from e
