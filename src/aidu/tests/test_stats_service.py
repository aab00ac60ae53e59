"""Tests for dashboard statistics."""
from datetime import date

from aidu.models.progress_models import ProgressDocument, UnitProgress
from aidu.services.curriculum_service import CurriculumService
from aidu.services.stats_service import (
    count_completed_sets,
    get_average_score,
    get_grade_progress,
    get_today_stats,
)

TODAY = date(2024, 5, 1)


def test_today_stats_for_today() -> None:
    """Test stats when the learner studied today."""
    progress = ProgressDocument(total_words_learned=12, last_study_date="2024-05-01")

    stats = get_today_stats(progress, TODAY)

    assert stats.learned_words == 12
    assert stats.completed_sets == 0
    assert stats.study_time == 0
    assert stats.average_score == 0


def test_today_stats_zero_on_other_day() -> None:
    """Test that stale study dates give empty stats."""
    progress = ProgressDocument(total_words_learned=12, last_study_date="2024-04-30")

    assert get_today_stats(progress, TODAY).learned_words == 0


def test_count_completed_sets() -> None:
    """Test counting completions across areas."""
    unit_progress = UnitProgress()
    unit_progress.vocabulary.completed_sets.extend(["flashcard", "vocab-set-a"])
    unit_progress.grammar_point("m1-l1-g1").completed_sets.append("m1-l1-g1-set-a")
    unit_progress.reading.completed_sets.append("reading-set-a")

    assert count_completed_sets(unit_progress) == 4


def test_grade_progress(curriculum: CurriculumService) -> None:
    """Test completed over total sets for a grade."""
    progress = ProgressDocument()
    progress.unit("middle-1", "middle-1-lesson-1").vocabulary.completed_sets.extend(
        ["flashcard", "vocab-set-a", "vocab-set-b"]
    )

    summary = get_grade_progress(progress, "middle-1", curriculum.get_units_by_grade("middle-1"))

    assert summary.completed == 3
    assert summary.total == 9
    assert summary.percentage == 33


def test_grade_progress_without_entry(curriculum: CurriculumService) -> None:
    """Test a grade with no progress."""
    summary = get_grade_progress(ProgressDocument(), "middle-2", curriculum.get_units_by_grade("middle-2"))

    assert (summary.completed, summary.total, summary.percentage) == (0, 0, 0)


def test_average_score() -> None:
    """Test averaging all recorded scores of a unit."""
    unit_progress = UnitProgress()
    assert get_average_score(unit_progress) == 0

    unit_progress.vocabulary.record_completion("vocab-set-a", 80)
    unit_progress.grammar_point("m1-l1-g1").record_completion("m1-l1-g1-set-a", 65)
    unit_progress.reading.record_completion("reading-set-a", 100)

    assert get_average_score(unit_progress) == 82
