"""Shared test fixtures for the joker test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from joker.utils.pattern import clear_cache


@pytest.fixture(autouse=True)
def _fresh_pattern_cache() -> Iterator[None]:
    """Start and finish each test with an empty compiled-wildcard cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def patterns_yaml(tmp_path: Path) -> str:
    """Write a sample pattern list YAML file and return its path."""
    content = """
version: "1.0"
casefold: false
patterns:
  - "*.log"
  - source: "Fairy?ake*"
    casefold: true
  - "[abc]"
"""
    yaml_file = tmp_path / "patterns.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
