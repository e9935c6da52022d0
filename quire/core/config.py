#!/usr/bin/env python3
"""
config.py
-------------------
Build configuration for Quire.

The path to the configuration file comes from the CONFIG environment
variable (or an explicit path from the CLI). The file is a small mapping:

    {
        "Input": "content",
        "Output": "public",
        "TemplatePage": "templates/page.html",
        "TemplateIndex": "templates/index.html"
    }

The file is parsed as JSON; a .yaml or .yml file is read with PyYAML's safe
loader instead. Keys are matched case-insensitively, an exact match wins.
Optional keys:
    - FailFast (bool, default true): abort on the first failing document
    - Sort (bool, default false): process documents sorted by file name

Usage:
    from quire.core.config import load_config, check_directories

    config = load_config()
    check_directories(config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

# --- Third-party imports ---
import yaml

# --- Local imports ---
from quire.core.exceptions import ConfigurationError, PathError
from quire.dataclasses.document import lookup_field


ENVIRONMENT_VARIABLE = "CONFIG"

REQUIRED_KEYS = ("Input", "Output", "TemplatePage", "TemplateIndex")

YAML_SUFFIXES = (".yaml", ".yml")

# Exit codes for missing directories
INPUT_DIR_EXIT_CODE = 2
OUTPUT_DIR_EXIT_CODE = 3


@dataclass(frozen=True)
class Configuration:
    """
    Immutable build configuration.

    Attributes:
        input_dir: Directory scanned for .md documents
        output_dir: Directory receiving the .html pages and index.html
        template_page: Template rendered once per document
        template_index: Template rendered once for the index
        fail_fast: Abort the run on the first failing document
        sort: Process documents in file name order
    """

    input_dir: Path
    output_dir: Path
    template_page: Path
    template_index: Path
    fail_fast: bool = True
    sort: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        """
        Build a configuration from a decoded mapping.

        Raises:
            ConfigurationError: If a key is missing or has the wrong type
        """
        values: Dict[str, str] = {}
        for key in REQUIRED_KEYS:
            value = lookup_field(data, key)
            if value is None:
                raise ConfigurationError(f"missing configuration key '{key}'")
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"configuration key '{key}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[key] = value

        flags: Dict[str, bool] = {}
        for key, default in (("FailFast", True), ("Sort", False)):
            value = lookup_field(data, key)
            if value is None:
                value = default
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"configuration key '{key}' must be a boolean, "
                    f"got {type(value).__name__}"
                )
            flags[key] = value

        return cls(
            input_dir=Path(values["Input"]),
            output_dir=Path(values["Output"]),
            template_page=Path(values["TemplatePage"]),
            template_index=Path(values["TemplateIndex"]),
            fail_fast=flags["FailFast"],
            sort=flags["Sort"],
        )


def config_path_from_env() -> Path:
    """
    Read the configuration file path from the environment.

    Raises:
        ConfigurationError: If CONFIG is unset or empty
    """
    value = os.environ.get(ENVIRONMENT_VARIABLE, "")
    if not value:
        raise ConfigurationError(
            f"missing environmental variable '{ENVIRONMENT_VARIABLE}'"
        )
    return Path(value)


def load_config(path: Optional[Union[str, Path]] = None) -> Configuration:
    """
    Load the build configuration.

    Args:
        path: Configuration file; defaults to the CONFIG variable

    Returns:
        Parsed Configuration

    Raises:
        ConfigurationError: If the variable is missing, or the file is
            unreadable, malformed or incomplete
    """
    config_path = Path(path) if path else config_path_from_env()

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"cannot read configuration file {config_path}: {e}"
        ) from e

    try:
        if config_path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"malformed configuration file {config_path}: {e}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"configuration file {config_path} must contain a mapping"
        )

    return Configuration.from_dict(data)


def check_directories(config: Configuration) -> None:
    """
    Verify that the input and output directories exist.

    Raises:
        PathError: exit code 2 for the input directory, 3 for the output
    """
    if not config.input_dir.is_dir():
        raise PathError(
            f"input directory error: {config.input_dir} is not a directory",
            config.input_dir,
            INPUT_DIR_EXIT_CODE,
        )
    if not config.output_dir.is_dir():
        raise PathError(
            f"output directory error: {config.output_dir} is not a directory",
            config.output_dir,
            OUTPUT_DIR_EXIT_CODE,
        )
