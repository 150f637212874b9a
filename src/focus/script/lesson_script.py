"""
Turns an authored lesson into a plain-text (markdown) script that the voice
agent follows while teaching. Pure and deterministic; never raises.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError

from api.utils.logger import configure_logging
from focus.script.schemas import (
    FocusItem,
    LessonContent,
    MicroTask,
    SmartLessonContent,
)

logger = configure_logging()

CORRECT_MARKER = " ✓"


def lesson_to_script(item: FocusItem | dict | Any) -> str:
    """
    Script for a "lesson" or "smart_lesson" item. Any other shape degrades to
    the item's instructions, then its bare title, then "".
    """
    title, instructions, kind, data = _unpack(item)
    try:
        if kind == "lesson":
            return lesson_content_to_script(LessonContent.model_validate(data), title)
        if kind == "smart_lesson":
            return smart_lesson_to_script(SmartLessonContent.model_validate(data), title)
    except ValidationError as e:
        logger.warning("lesson script: unreadable %s content title=%r errors=%s", kind, title, e.error_count())
    return instructions or title


def _unpack(item: Any) -> tuple[str, str, Optional[str], Any]:
    if isinstance(item, FocusItem):
        content = item.content
        return (
            item.title or "",
            item.instructions_md or "",
            content.kind if content else None,
            content.data if content else None,
        )
    if not isinstance(item, dict):
        return "", "", None, None
    title = item.get("title")
    instructions = item.get("instructions_md")
    content = item.get("content")
    kind = data = None
    if isinstance(content, dict):
        kind = content.get("kind")
        data = content.get("data")
    return (
        title if isinstance(title, str) else "",
        instructions if isinstance(instructions, str) else "",
        kind if isinstance(kind, str) else None,
        data,
    )


def _section(heading: str, body: Optional[str] = None) -> str:
    return f"\n## {heading}\n{body}" if body else f"\n## {heading}"


def lesson_content_to_script(data: LessonContent, title: str = "") -> str:
    parts: list[str] = []

    heading = data.title or title
    if heading:
        parts.append(f"# {heading}")

    if data.introduction:
        parts.append(_section("Bevezető", data.introduction))
    elif data.summary:
        parts.append(_section("Összefoglaló", data.summary))

    if data.vocabulary_table:
        parts.append(_section("Szókincs"))
        for v in data.vocabulary_table:
            pron = f" ({v.pronunciation})" if v.pronunciation else ""
            parts.append(f"- **{v.word}**{pron} = {v.translation}")
            if v.example_sentence:
                translation = f" — {v.example_translation}" if v.example_translation else ""
                parts.append(f'  Példa: "{v.example_sentence}"{translation}')

    g = data.grammar_explanation
    if g and (g.rule_title or g.explanation or g.formation_pattern or g.examples):
        parts.append(_section(f"Nyelvtan: {g.rule_title}" if g.rule_title else "Nyelvtan"))
        if g.explanation:
            parts.append(g.explanation)
        if g.formation_pattern:
            parts.append(f"Képzési minta: {g.formation_pattern}")
        if g.examples:
            parts.append("Példák:")
            for ex in g.examples:
                note = f" ({ex.note})" if ex.note else ""
                parts.append(f"- {ex.target} — {ex.hungarian}{note}")

    for d in data.dialogues:
        if not (d.title or d.context or d.lines):
            continue
        parts.append(_section(f"Párbeszéd: {d.title}" if d.title else "Párbeszéd"))
        if d.context:
            parts.append(d.context)
        for line in d.lines:
            translation = f" ({line.translation})" if line.translation else ""
            parts.append(f"**{line.speaker}:** {line.text}{translation}")

    if data.key_points:
        parts.append(_section("Kulcspontok"))
        parts.extend(f"- {p}" for p in data.key_points)

    if data.cultural_note:
        parts.append(_section("Kulturális megjegyzés", data.cultural_note))

    # Non-Latin scripts: ordered teaching blocks with per-glyph hints
    for block in data.lesson_flow:
        if block.title_hu:
            parts.append(_section(block.title_hu))
        if block.body_md:
            parts.append(block.body_md)
        for letter in block.letters:
            parts.append(f"- {letter.glyph} ({letter.latin_hint}) — {letter.sound_hint_hu}")

    return "\n".join(parts)


def _task_lines(number: int, task: MicroTask) -> list[str]:
    lines = [_section(f"{number}. feladat", task.instruction)]
    for i, option in enumerate(task.options):
        marker = CORRECT_MARKER if i == task.correct_index else ""
        lines.append(f"  {chr(ord('A') + i)}) {option}{marker}")
    if task.explanation:
        lines.append(f"Magyarázat: {task.explanation}")
    return lines


def smart_lesson_to_script(data: SmartLessonContent, title: str = "") -> str:
    parts: list[str] = []
    if title:
        parts.append(f"# {title}")
    if data.hook:
        parts.append(_section("Bevezető gondolat", data.hook))
    for number, task in ((1, data.micro_task_1), (2, data.micro_task_2)):
        if task and (task.instruction or task.options):
            parts.extend(_task_lines(number, task))
    if data.insight:
        parts.append(_section("Összefoglaló", data.insight))
    return "\n".join(parts)
