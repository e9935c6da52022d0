"""
Build pipeline: Markdown documents → HTML pages + index.

    from quire.pipeline.md2html import build_site, render_file
"""
