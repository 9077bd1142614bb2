"""
Shared test fixtures.
"""

from pathlib import Path

import pytest

from javagen_lib import GeneratorConfig


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return an empty directory to generate into."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def small_config(output_dir: Path) -> GeneratorConfig:
    """A config that keeps the number of generated files small."""
    return GeneratorConfig(output_dir=str(output_dir), max_arity=2)
