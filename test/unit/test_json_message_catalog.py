from __future__ import annotations

import json
from pathlib import Path

from infra.i18n import JsonMessageCatalog

_LOCALES = Path(__file__).resolve().parents[2] / "infra" / "i18n" / "locales"


def test_english_messages_are_formatted() -> None:
    catalog = JsonMessageCatalog("en")
    assert catalog.locale == "en"
    assert catalog.text("job_no", current=3, total=40) == "Job 3 of 40"
    assert catalog.tokens("affirmative") == ("yes",)


def test_french_messages_and_tokens() -> None:
    catalog = JsonMessageCatalog("fr")
    assert catalog.locale == "fr"
    assert catalog.text("moved_to_page", page=2) == "Passage à la page 2."
    assert catalog.tokens("affirmative") == ("oui", "yes")


def test_unknown_locale_falls_back_to_english() -> None:
    catalog = JsonMessageCatalog("de")
    assert catalog.locale == "en"
    assert catalog.text("no_more_pages") == "No more pages to visit."


def test_missing_key_falls_back_to_english_then_key(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text(json.dumps({"hello": "Hello {name}", "only_en": "English"}))
    (tmp_path / "es.json").write_text(json.dumps({"hello": "Hola {name}"}))
    catalog = JsonMessageCatalog("es", locales_dir=str(tmp_path))

    assert catalog.text("hello", name="Ada") == "Hola Ada"
    assert catalog.text("only_en") == "English"
    assert catalog.text("nope") == "nope"
    assert catalog.tokens("nope") == ()


def test_missing_parameter_returns_template() -> None:
    catalog = JsonMessageCatalog("en")
    assert catalog.text("skip_title") == "Skipping job with excluded title: {title}"


def test_shipped_locales_define_the_same_keys() -> None:
    en = json.loads((_LOCALES / "en.json").read_text(encoding="utf-8"))
    fr = json.loads((_LOCALES / "fr.json").read_text(encoding="utf-8"))
    assert set(en) == set(fr)
