"""
conftest.py
-----------
Shared pytest fixtures for Quire tests.

Provides fixtures for:
- Document text factories
- Site directories (input, output, templates)
- Configuration files
"""
import json
import pytest
from pathlib import Path


PAGE_TEMPLATE = (
    "<title>{{ Title }}</title>\n"
    "<time>{{ Date }}</time>\n"
    "{% for author in Authors %}<address>{{ author.Name }}</address>\n{% endfor %}"
    "<main>{{ Content }}</main>\n"
)

INDEX_TEMPLATE = (
    "<ul>\n"
    "{% for link in Links %}"
    '<li><a href="{{ link.Url }}">{{ link.Title }}</a> {{ link.Date }}</li>\n'
    "{% endfor %}"
    "</ul>\n"
)


# ----- Content Fixtures -----

def _document_text(header, body="# Hello\n"):
    if not isinstance(header, str):
        header = json.dumps(header)
    return f"```json\n{header}\n```\n{body}"


@pytest.fixture
def make_document():
    """Factory building document text from a header (dict or raw JSON) and body."""
    return _document_text


@pytest.fixture
def header():
    """Minimal valid header."""
    return {"Title": "Hi", "Date": "2020-01-02T00:00:00Z", "Authors": []}


@pytest.fixture
def document(header):
    """Document text with the minimal header and a level-one heading."""
    return _document_text(header, "# Hello")


# ----- Site Fixtures -----

@pytest.fixture
def site(tmp_path):
    """
    Site layout with empty input/output directories and both templates.

    Returns a dict with keys: input, output, page, index.
    """
    input_dir = tmp_path / "content"
    output_dir = tmp_path / "public"
    templates_dir = tmp_path / "templates"
    for directory in (input_dir, output_dir, templates_dir):
        directory.mkdir()

    page = templates_dir / "page.html"
    page.write_text(PAGE_TEMPLATE, encoding="utf-8")
    index = templates_dir / "index.html"
    index.write_text(INDEX_TEMPLATE, encoding="utf-8")

    return {"input": input_dir, "output": output_dir, "page": page, "index": index}


@pytest.fixture
def config_file(tmp_path, site):
    """JSON configuration file pointing at the site fixture."""
    path = tmp_path / "site.json"
    path.write_text(
        json.dumps(
            {
                "Input": str(site["input"]),
                "Output": str(site["output"]),
                "TemplatePage": str(site["page"]),
                "TemplateIndex": str(site["index"]),
            }
        ),
        encoding="utf-8",
    )
    return path
