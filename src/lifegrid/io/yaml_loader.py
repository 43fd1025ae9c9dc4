"""YAML state file loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from lifegrid.utils.exceptions import StateError


def load_yaml(path: Path) -> Any:
    """Load and parse a hand-written YAML state file.

    Unquoted dates such as ``birthdate: 1990-01-01`` come back as
    ``datetime.date`` objects; the state loader accepts those alongside
    ISO-8601 strings.

    Raises:
        FileNotFoundError: If the file does not exist.
        StateError: If the file is not valid UTF-8 YAML.
    """
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise StateError(f"{path}: invalid YAML: {exc}") from exc
