from collections.abc import Callable
from pathlib import Path

import pytest

from src.rules.models import Rules


@pytest.fixture
def write_rules(tmp_path: Path) -> Callable[..., Path]:
    """
    Writes rules content to a file under tmp_path and returns its path.
    """

    def _write(content: str, suffix: str = ".yaml") -> Path:
        path = tmp_path / f"rules{suffix}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_rules() -> Rules:
    """In-memory rules matching the shipped rules.yaml."""
    return Rules.model_validate(
        {
            "project": {"slug": "richtext-segments", "rules_version": "1.0"},
            "richtext": {
                "formatting": {
                    "long_word_min_length": 10,
                    "long_word_class": "longWord",
                    "linkify": True,
                    "link_class": "link",
                },
            },
        }
    )
