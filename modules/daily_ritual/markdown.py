"""
Сборка markdown-фрагментов документа
"""
from typing import Optional, Sequence

import config
from modules.cards import Card
from modules.moon_phase import MoonInfo
from .models import MarkdownSections

TASK_LINES_COUNT = 3
TASK_LINE = "- [ ] "


def render_keywords(keywords: Sequence[str], label: str = "Keywords") -> str:
    """Жирная подпись и по строке `- keyword` на каждое слово"""
    lines = [f"**{label}:**"]
    lines.extend(f"- {keyword}" for keyword in keywords)
    return "\n".join(lines)


def render_card(title: str, card: Card) -> str:
    return "\n".join([
        f"### {title}: {card.name}",
        "",
        card.paragraph,
        "",
        render_keywords(card.keywords),
    ])


def build_intro_markdown(
    date_label: str,
    moon: MoonInfo,
    tarot: Card,
    lenormand: Card,
    weather: str,
) -> str:
    text = f"""
> **How to use this page:** read the cards slowly, set one intention,
> tick off your three tasks and log any movement below. Keep it light.

## ✨ Daily Ritual: {date_label}

**Moon:** {moon.phase_name} ({moon.illumination_percent}% illuminated)

**Today's intention:**

{render_card('Tarot', tarot)}

{render_card('Lenormand', lenormand)}

### Weather

{weather}
"""
    return text.strip()


def build_tasks_markdown() -> str:
    # строки задач заканчиваются пробелом, обрезаем только переводы строк
    lines = ["## ✅ Top 3 Tasks", ""]
    lines.extend(TASK_LINE for _ in range(TASK_LINES_COUNT))
    return "\n".join(lines).strip("\n")


def build_movement_markdown() -> str:
    text = """
## 🚶 Movement Log

| Walking | Wall Push-Ups | Dumbbells |
| --- | --- | --- |
|  |  |  |
|  |  |  |

Any movement counts, even five minutes.
"""
    return text.strip()


def build_journal_markdown() -> str:
    text = """
## 📝 Journal

What felt supportive today, and what would you like to carry into tomorrow?
"""
    return text.strip()


def build_link_markdown(tasks_url: Optional[str]) -> str:
    if tasks_url:
        body = f"[Open today's tasks]({tasks_url})"
    else:
        body = (
            f"_No tasks link configured. Set the `{config.DAILY_TASKS_URL_ENV}` "
            f"environment variable to add one._"
        )
    return f"## 🔗 Daily Tasks\n\n{body}".strip()


def build_markdown_sections(
    date_label: str,
    moon: MoonInfo,
    tarot: Card,
    lenormand: Card,
    weather: str,
    tasks_url: Optional[str] = None,
) -> MarkdownSections:
    """Все пять фрагментов документа"""
    return MarkdownSections(
        intro=build_intro_markdown(date_label, moon, tarot, lenormand, weather),
        tasks=build_tasks_markdown(),
        movement=build_movement_markdown(),
        journal=build_journal_markdown(),
        link=build_link_markdown(tasks_url),
    )
