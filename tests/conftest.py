"""Shared fixtures for translation table tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture(name="translations_dir")
def translations_dir_fixture(tmp_path: Path) -> Path:
    """Create a directory holding a French JSON translation table."""
    translations_dir = tmp_path / "translations"
    translations_dir.mkdir()
    (translations_dir / "fr-fr.json").write_text(
        json.dumps(
            {
                "Hello": "Bonjour",
                "Welcome back, :user": "Bon retour, :user",
                "Goodbye": "Au revoir",
            }
        ),
        encoding="utf-8",
    )
    return translations_dir
