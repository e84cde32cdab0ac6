import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi import Depends

from src.adapters.render.html_renderer import HtmlSegmentRenderer
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("RICHTEXT_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


class RichTextRulesAdapter:
    """Adapter to map generic Rules to the richtext component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.richtext

    def get_formatting_defaults(self) -> dict[str, Any]:
        return self._rules.formatting.model_dump()


def get_richtext_rules(rules: Rules = Depends(get_rules)) -> RichTextRulesAdapter:
    return RichTextRulesAdapter(rules)


# --- Renderers ---
def get_html_renderer(rules: Rules = Depends(get_rules)) -> HtmlSegmentRenderer:
    return HtmlSegmentRenderer(ugc=rules.richtext.link_rel.ugc)
