#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Quire project.

Every failure a build can hit is mapped onto one of these classes so the
CLI can report a single diagnostic line and pick the right exit code.

Exception Hierarchy:
    Exception (built-in)
    └── QuireError - Base for all project errors
        ├── ConfigurationError - CONFIG variable or file problems
        ├── PathError - Input/output directory missing
        ├── ValidationError - Parsed data has the wrong shape
        ├── MetaBlockError - Embedded ```json header problems
        ├── EmptyFileError - Zero-length document
        ├── TemplateError - Template missing, malformed or failing
        ├── OutputError - Output file cannot be created or written
        └── RenderError - A page or the index failed during a build

Usage:
    from quire.core.exceptions import MetaBlockError, RenderError

    try:
        build_site(...)
    except RenderError as e:
        logger.log_error(e)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class QuireError(Exception):
    """
    Base exception for all Quire errors.

    Catch this to handle any failure raised by the build pipeline.
    """

    pass


class ConfigurationError(QuireError):
    """
    Exception for configuration loading failures.

    Raised when:
    - The CONFIG environment variable is unset or empty
    - The configuration file cannot be read
    - The file is not well-formed YAML/JSON
    - A required key is missing or not a string

    Examples:
        >>> raise ConfigurationError("missing environmental variable 'CONFIG'")
        >>> raise ConfigurationError("missing configuration key 'Input'")
    """

    pass


class PathError(QuireError):
    """
    Exception for a missing input or output directory.

    Attributes:
        path: The directory that was checked
        exit_code: Process exit code the CLI uses for this failure
    """

    def __init__(self, message: str, path: Path, exit_code: int) -> None:
        super().__init__(message)
        self.path = path
        self.exit_code = exit_code


class ValidationError(QuireError):
    """
    Exception for data validation failures.

    Raised when decoded data does not match the expected record shape:
    - Title is not a string
    - Date is missing or not a valid date
    - Authors is not a list of objects

    Examples:
        >>> raise ValidationError("Title must be a string, got int")
    """

    pass


class MetaBlockError(QuireError):
    """
    Exception for problems with the embedded metadata block.

    Examples:
        >>> raise MetaBlockError("missing meta code block start")
        >>> raise MetaBlockError("missing meta code block end")
    """

    pass


class EmptyFileError(QuireError):
    """Exception for zero-length documents."""

    pass


class TemplateError(QuireError):
    """
    Exception for template loading and execution failures.

    Raised when a template file is missing or unreadable, contains a
    syntax error, or references a field the data value does not have.
    """

    pass


class OutputError(QuireError):
    """Exception for output files that cannot be created or written."""

    pass


class RenderError(QuireError):
    """
    Exception for a failed page or index render during a build.

    Attributes:
        path: Source document (or index output) that failed, if known
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
