from datetime import datetime, timezone

from core.utils import build_preview, format_date_label
from modules.cards import LENORMAND_CARDS, TAROT_CARDS
from modules.daily_ritual import build_markdown_sections
from modules.daily_ritual.markdown import render_keywords
from modules.moon_phase import get_moon_info

WEATHER = "clear sky, about 70°F in Huntsville."


def _sections(tasks_url=None):
    return build_markdown_sections(
        date_label="Monday, October 19, 2026",
        moon=get_moon_info(datetime(2026, 10, 19, 12, tzinfo=timezone.utc)),
        tarot=TAROT_CARDS[0],
        lenormand=LENORMAND_CARDS[1],
        weather=WEATHER,
        tasks_url=tasks_url,
    )


def test_date_label_uses_long_english_format():
    when = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)
    assert format_date_label(when) == "Monday, October 19, 2026"


def test_date_label_converts_to_configured_timezone():
    when = datetime(2026, 10, 20, 2, 0, tzinfo=timezone.utc)
    assert format_date_label(when, "America/Chicago") == "Monday, October 19, 2026"


def test_keywords_keep_catalog_order():
    assert render_keywords(["hope", "renewal"]) == "**Keywords:**\n- hope\n- renewal"


def test_intro_contains_cards_moon_and_weather():
    intro = _sections().intro
    assert "Monday, October 19, 2026" in intro
    assert TAROT_CARDS[0].name in intro
    assert TAROT_CARDS[0].paragraph in intro
    assert LENORMAND_CARDS[1].name in intro
    assert WEATHER in intro
    assert "illuminated" in intro
    for keyword in TAROT_CARDS[0].keywords:
        assert f"- {keyword}" in intro


def test_tasks_have_exactly_three_empty_checkboxes():
    lines = _sections().tasks.splitlines()
    assert lines.count("- [ ] ") == 3
    assert _sections().tasks.endswith("- [ ] ")
    assert sum(1 for line in lines if line.startswith("- [")) == 3


def test_movement_table_has_three_columns_and_two_empty_rows():
    movement = _sections().movement
    assert "| Walking | Wall Push-Ups | Dumbbells |" in movement
    assert movement.count("|  |  |  |") == 2


def test_link_section_with_and_without_url():
    assert "[Open today's tasks](https://tasks.example.test)" in _sections("https://tasks.example.test").link
    assert "DAILY_TASKS_URL" in _sections().link


def test_fragments_have_no_surrounding_blank_lines():
    for fragment in _sections().as_list():
        assert fragment == fragment.strip("\n")
        assert fragment == fragment.lstrip()
    for fragment in (_sections().intro, _sections().movement, _sections().journal, _sections().link):
        assert fragment == fragment.strip()


def test_preview_is_truncated_with_ellipsis():
    preview = build_preview(_sections().as_list())
    assert len(preview) == 303
    assert preview.endswith("...")
    assert build_preview(["short"]) == "short..."
