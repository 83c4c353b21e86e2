"""Shared utilities for hotpatch-check."""
import pathlib
from typing import Any, Iterator

import yaml


def load_yaml(path: pathlib.Path) -> Any:
    """Load YAML file with UTF-8 encoding."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def iter_lines(path: pathlib.Path) -> Iterator[str]:
    """Yield lines of a text file one at a time, newlines stripped."""
    # Logs can carry stray bytes from crashed services; never fail on decoding.
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")


def read_lines(path: pathlib.Path) -> list[str]:
    """Read all lines of a text file, newlines stripped."""
    return list(iter_lines(path))
