"""Lesson documents and their linearization into voice-agent scripts."""

from focus.script.lesson_script import lesson_content_to_script, lesson_to_script, smart_lesson_to_script
from focus.script.schemas import (
    Dialogue,
    DialogueLine,
    FocusItem,
    GrammarExample,
    GrammarExplanation,
    ItemContent,
    LessonContent,
    LessonFlowBlock,
    LetterHint,
    MicroTask,
    SmartLessonContent,
    VocabularyEntry,
)

__all__ = [
    "lesson_content_to_script",
    "lesson_to_script",
    "smart_lesson_to_script",
    "Dialogue",
    "DialogueLine",
    "FocusItem",
    "GrammarExample",
    "GrammarExplanation",
    "ItemContent",
    "LessonContent",
    "LessonFlowBlock",
    "LetterHint",
    "MicroTask",
    "SmartLessonContent",
    "VocabularyEntry",
]
