"""Unit tests for the focus wizard state machine."""
from __future__ import annotations

import asyncio

import pytest

from focus.wizard import (
    Difficulty,
    DurationDays,
    FocusVariant,
    FocusWizard,
    LanguageLevel,
    LanguageSettings,
    LanguageTrack,
    MinutesPerDay,
    Pacing,
    ProjectSettings,
    SmartCategory,
    SmartLearningSettings,
    Tone,
    WizardStatus,
    total_steps_for,
)


class Recorder:
    """Collects wizard callbacks."""

    def __init__(self):
        self.completed = []
        self.cancelled = 0

    async def on_complete(self, config):
        self.completed.append(config)

    def on_cancel(self):
        self.cancelled += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def wizard(recorder):
    return FocusWizard(on_complete=recorder.on_complete, on_cancel=recorder.on_cancel)


@pytest.mark.unit
class TestInitialState:
    def test_starts_on_step_one_without_variant(self, wizard):
        assert wizard.step == 1
        assert wizard.focus_variant is None
        assert wizard.configuration.step2 is None
        assert wizard.status == WizardStatus.ACTIVE

    def test_step3_defaults(self, wizard):
        step3 = wizard.configuration.step3
        assert step3.tone == Tone.CASUAL
        assert step3.difficulty == Difficulty.NORMAL
        assert step3.pacing == Pacing.SMALL_STEPS

    def test_next_blocked_without_variant(self, wizard):
        assert wizard.can_proceed() is False
        assert wizard.next() is False
        assert wizard.step == 1


@pytest.mark.unit
class TestTotalSteps:
    @pytest.mark.parametrize(
        "variant,expected",
        [
            (None, 3),
            (FocusVariant.LANGUAGE, 3),
            (FocusVariant.PROJECT, 3),
            (FocusVariant.SMART_LEARNING, 4),
        ],
    )
    def test_total_steps_for(self, variant, expected):
        assert total_steps_for(variant) == expected

    def test_total_steps_follows_variant(self, wizard):
        wizard.select_variant(FocusVariant.SMART_LEARNING)
        assert wizard.total_steps == 4
        wizard.select_variant(FocusVariant.PROJECT)
        assert wizard.total_steps == 3

    def test_step_names_smart_learning(self, wizard):
        wizard.select_variant("smart_learning")
        names = [wizard.step_name]
        while wizard.next():
            names.append(wizard.step_name)
        assert names == ["focus", "settings", "commitment", "summary"]
        assert wizard.progress == 1.0

    def test_step_names_language(self, wizard):
        wizard.select_variant("language")
        names = [wizard.step_name]
        while wizard.next():
            names.append(wizard.step_name)
        assert names == ["focus", "settings", "summary"]


@pytest.mark.unit
class TestNavigation:
    def test_next_commits_step2_when_leaving_settings(self, wizard):
        wizard.select_variant(FocusVariant.LANGUAGE)
        assert wizard.next() is True
        wizard.select_language("german")
        wizard.select_minutes(45)
        assert wizard.configuration.step2 is None
        assert wizard.next() is True
        step2 = wizard.configuration.step2
        assert isinstance(step2, LanguageSettings)
        assert step2.target_language == "german"
        assert step2.minutes_per_day == MinutesPerDay.FORTY_FIVE

    def test_next_is_blocked_on_last_step(self, wizard):
        wizard.select_variant(FocusVariant.PROJECT)
        wizard.next()
        wizard.next()
        assert wizard.is_last_step
        assert wizard.next() is False
        assert wizard.step == 3

    def test_back_keeps_previous_values(self, wizard):
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.next()
        wizard.select_language("korean")
        wizard.select_level(LanguageLevel.INTERMEDIATE)
        wizard.next()
        assert wizard.back() is True
        assert wizard.step == 2
        assert wizard.draft.target_language == "korean"
        assert wizard.draft.level == LanguageLevel.INTERMEDIATE
        assert wizard.back() is True
        assert wizard.focus_variant == FocusVariant.LANGUAGE
        wizard.next()
        assert wizard.draft.target_language == "korean"

    def test_back_on_step_one_cancels_once(self, wizard, recorder):
        assert wizard.back() is False
        assert recorder.cancelled == 1
        assert wizard.status == WizardStatus.CANCELLED
        # a closed wizard ignores further actions
        assert wizard.back() is False
        assert recorder.cancelled == 1
        assert recorder.completed == []

    def test_cancelled_wizard_cannot_advance_or_finalize(self, wizard, recorder):
        wizard.select_variant(FocusVariant.PROJECT)
        wizard.back()
        assert wizard.next() is False
        assert asyncio.run(wizard.finalize()) is None
        assert recorder.completed == []


@pytest.mark.unit
class TestLevelTrackCoupling:
    def test_intermediate_forces_career(self, wizard):
        wizard.select_track(LanguageTrack.FOUNDATIONS)
        wizard.select_level(LanguageLevel.INTERMEDIATE)
        assert wizard.draft.track == LanguageTrack.CAREER

    def test_beginner_forces_foundations(self, wizard):
        wizard.select_track(LanguageTrack.CAREER)
        wizard.select_level("beginner")
        assert wizard.draft.track == LanguageTrack.FOUNDATIONS

    @pytest.mark.parametrize("track", [LanguageTrack.FOUNDATIONS, LanguageTrack.CAREER])
    def test_basic_leaves_track_unchanged(self, wizard, track):
        wizard.select_track(track)
        wizard.select_level(LanguageLevel.BASIC)
        assert wizard.draft.track == track

    def test_track_can_be_changed_after_level(self, wizard):
        wizard.select_level(LanguageLevel.INTERMEDIATE)
        wizard.select_track(LanguageTrack.FOUNDATIONS)
        assert wizard.draft.track == LanguageTrack.FOUNDATIONS


@pytest.mark.unit
class TestSelections:
    def test_rejects_minutes_outside_options(self, wizard):
        with pytest.raises(ValueError):
            wizard.select_minutes(15)

    def test_rejects_unknown_language(self, wizard):
        with pytest.raises(ValueError):
            wizard.select_language("klingon")

    def test_smart_learning_rejects_thirty_days(self, wizard):
        wizard.select_variant(FocusVariant.SMART_LEARNING)
        with pytest.raises(ValueError):
            wizard.select_duration(30)

    def test_language_accepts_thirty_days(self, wizard):
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.select_duration(30)
        assert wizard.draft.duration_days == DurationDays.MONTH

    def test_month_chosen_before_smart_learning_is_shortened(self, wizard):
        wizard.select_duration(30)
        wizard.select_variant(FocusVariant.SMART_LEARNING)
        assert wizard.draft.duration_days == DurationDays.WEEK
        assert wizard.next() is True
        assert wizard.next() is True
        assert isinstance(wizard.configuration.step2, SmartLearningSettings)
        assert wizard.configuration.step2.duration_days == DurationDays.WEEK

    def test_month_chosen_before_language_is_kept(self, wizard):
        wizard.select_duration(30)
        wizard.select_variant(FocusVariant.LANGUAGE)
        assert wizard.draft.duration_days == DurationDays.MONTH

    def test_advanced_settings(self, wizard):
        wizard.set_tone("strict")
        wizard.set_difficulty(Difficulty.HARD)
        wizard.set_pacing("big_blocks")
        assert wizard.configuration.step3.tone == Tone.STRICT
        assert wizard.configuration.step3.difficulty == Difficulty.HARD
        assert wizard.configuration.step3.pacing == Pacing.BIG_BLOCKS


@pytest.mark.unit
class TestVariantChange:
    def test_switching_variant_resets_steps_2_and_3(self, wizard):
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.next()
        wizard.select_language("japanese")
        wizard.set_tone(Tone.STRICT)
        wizard.next()
        assert wizard.configuration.step2 is not None
        wizard.back()
        wizard.back()
        wizard.select_variant(FocusVariant.PROJECT)
        assert wizard.configuration.step2 is None
        assert wizard.configuration.step3.tone == Tone.CASUAL
        assert wizard.draft.target_language == "english"

    def test_reselecting_same_variant_keeps_data(self, wizard):
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.select_language("french")
        wizard.set_tone(Tone.NEUTRAL)
        wizard.select_variant(FocusVariant.LANGUAGE)
        assert wizard.draft.target_language == "french"
        assert wizard.configuration.step3.tone == Tone.NEUTRAL


@pytest.mark.unit
class TestFinalize:
    @pytest.mark.asyncio
    async def test_finalize_only_on_last_step(self, wizard, recorder):
        wizard.select_variant(FocusVariant.PROJECT)
        assert await wizard.finalize() is None
        wizard.next()
        assert await wizard.finalize() is None
        assert recorder.completed == []

    @pytest.mark.asyncio
    async def test_finalize_recommits_edited_draft(self, wizard, recorder):
        wizard.select_variant(FocusVariant.PROJECT)
        wizard.next()
        wizard.set_context("Portfólió oldal")
        wizard.next()
        # edited after step 2 was committed
        wizard.set_context("Portfólió oldal React-ben")
        wizard.select_duration(14)
        config = await wizard.finalize()
        assert isinstance(config.step2, ProjectSettings)
        assert config.step2.context == "Portfólió oldal React-ben"
        assert config.step2.duration_days == DurationDays.TWO_WEEKS
        assert recorder.completed == [config]
        assert wizard.status == WizardStatus.COMPLETED
        assert recorder.cancelled == 0

    @pytest.mark.asyncio
    async def test_smart_learning_full_flow(self, wizard, recorder):
        wizard.select_variant(FocusVariant.SMART_LEARNING)
        wizard.next()
        wizard.select_category(SmartCategory.DIGITAL_LITERACY)
        wizard.select_minutes(10)
        wizard.next()
        wizard.select_duration(21)
        wizard.next()
        assert wizard.step == 4
        config = await wizard.finalize()
        assert isinstance(config.step2, SmartLearningSettings)
        assert config.step2.category == SmartCategory.DIGITAL_LITERACY
        assert config.step2.duration_days == DurationDays.THREE_WEEKS
        assert config.step2.minutes_per_day == MinutesPerDay.TEN

    @pytest.mark.asyncio
    async def test_finalize_disabled_while_pending(self, recorder):
        started = asyncio.Event()
        release = asyncio.Event()
        calls = []

        async def slow_complete(config):
            calls.append(config)
            started.set()
            await release.wait()

        wizard = FocusWizard(on_complete=slow_complete, on_cancel=recorder.on_cancel)
        wizard.select_variant(FocusVariant.PROJECT)
        wizard.next()
        wizard.next()

        first = asyncio.create_task(wizard.finalize())
        await started.wait()
        assert wizard.generating is True
        assert wizard.can_finalize() is False
        assert await wizard.finalize() is None
        release.set()
        assert await first is not None
        assert len(calls) == 1
        assert wizard.generating is False

    @pytest.mark.asyncio
    async def test_failed_completion_keeps_wizard_open(self, recorder):
        async def broken_complete(config):
            raise RuntimeError("create-plan failed")

        wizard = FocusWizard(on_complete=broken_complete, on_cancel=recorder.on_cancel)
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.next()
        wizard.next()
        with pytest.raises(RuntimeError):
            await wizard.finalize()
        assert wizard.status == WizardStatus.ACTIVE
        assert wizard.generating is False
        assert wizard.can_finalize() is True

    @pytest.mark.asyncio
    async def test_sync_completion_callback(self, recorder):
        received = []
        wizard = FocusWizard(on_complete=received.append, on_cancel=recorder.on_cancel)
        wizard.select_variant(FocusVariant.LANGUAGE)
        wizard.next()
        wizard.next()
        config = await wizard.finalize()
        assert received == [config]
        assert isinstance(config.step2, LanguageSettings)
