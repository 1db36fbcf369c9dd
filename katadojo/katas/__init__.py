"""Kata discovery and loading for katadojo.

Each kata is a subdirectory of katadojo/katas/ containing:
    __init__.py: NAME and DESCRIPTION constants, plus the kata's public API
    tests/: pytest suite for the kata
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class KataInfo:
    """Metadata about a discovered kata."""

    name: str
    description: str
    path: Path
    tests_dir: Path

    @property
    def test_modules(self) -> list[Path]:
        """The kata's ``test_*.py`` files, sorted by name."""
        return sorted(self.tests_dir.glob("test_*.py"))


def _katas_root() -> Path:
    """Absolute path to the katas/ directory."""
    return Path(__file__).parent


def list_katas() -> list[KataInfo]:
    """Discover all available katas, sorted by directory name.

    Subdirectories without an __init__.py or a tests/ directory are skipped.
    """
    katas = []
    for child in sorted(_katas_root().iterdir()):
        if not child.is_dir() or child.name.startswith("_"):
            continue
        info = load_kata(child.name)
        if info:
            katas.append(info)
    return katas


def load_kata(name: str) -> Optional[KataInfo]:
    """Load a single kata by name.

    Args:
        name: Directory name under katadojo/katas/ (e.g., 'fizz_buzz').

    Returns:
        KataInfo if the kata exists and is valid, None otherwise.
    """
    kata_dir = _katas_root() / name
    tests_dir = kata_dir / "tests"
    if not (kata_dir / "__init__.py").exists() or not tests_dir.is_dir():
        return None

    try:
        mod = importlib.import_module(f"katadojo.katas.{name}")
    except ImportError:
        return None

    if not hasattr(mod, "NAME"):
        return None

    return KataInfo(
        name=mod.NAME,
        description=getattr(mod, "DESCRIPTION", ""),
        path=kata_dir,
        tests_dir=tests_dir,
    )
