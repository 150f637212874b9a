"""
Pydantic schemas for authored lesson documents read by the script linearizer.

A FocusItem wraps its content in a {kind, data} envelope; only "lesson" and
"smart_lesson" content is turned into a full script.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class VocabularyEntry(BaseModel):
    word: str
    translation: str = ""
    pronunciation: Optional[str] = None
    example_sentence: Optional[str] = None
    example_translation: Optional[str] = None


class GrammarExample(BaseModel):
    target: str
    hungarian: str = ""
    note: Optional[str] = None


class GrammarExplanation(BaseModel):
    rule_title: str = ""
    explanation: str = ""
    formation_pattern: Optional[str] = None
    examples: List[GrammarExample] = Field(default_factory=list)


class DialogueLine(BaseModel):
    speaker: str
    text: str
    translation: str = ""


class Dialogue(BaseModel):
    title: str = ""
    context: Optional[str] = None
    lines: List[DialogueLine] = Field(default_factory=list)


class LetterHint(BaseModel):
    """One glyph of a non-Latin script with its transliteration and sound hint."""
    glyph: str
    latin_hint: str = ""
    sound_hint_hu: str = ""


class LessonFlowBlock(BaseModel):
    title_hu: str = ""
    body_md: str = ""
    letters: List[LetterHint] = Field(default_factory=list)


class LessonContent(BaseModel):
    """Full language lesson."""
    title: Optional[str] = None
    introduction: Optional[str] = None
    summary: Optional[str] = None
    vocabulary_table: List[VocabularyEntry] = Field(default_factory=list)
    grammar_explanation: Optional[GrammarExplanation] = None
    dialogues: List[Dialogue] = Field(default_factory=list)
    key_points: List[str] = Field(default_factory=list)
    cultural_note: Optional[str] = None
    lesson_flow: List[LessonFlowBlock] = Field(default_factory=list)


class MicroTask(BaseModel):
    instruction: str = ""
    options: List[str] = Field(default_factory=list)
    correct_index: Optional[int] = None
    explanation: Optional[str] = None


class SmartLessonContent(BaseModel):
    """Micro-skill lesson: hook, two micro tasks, closing insight."""
    hook: str = ""
    micro_task_1: Optional[MicroTask] = None
    micro_task_2: Optional[MicroTask] = None
    insight: str = ""


class ItemContent(BaseModel):
    kind: str
    data: Any = None


class FocusItem(BaseModel):
    """A single authored plan item as stored by the persistence backend."""
    title: str = ""
    instructions_md: Optional[str] = None
    content: Optional[ItemContent] = None
