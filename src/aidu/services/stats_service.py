"""Dashboard statistics derived from the progress document."""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from aidu.models.content_models import TextbookUnit
from aidu.models.progress_models import ProgressDocument, UnitProgress, today_iso
from aidu.models.quiz_models import TodayStats, round_half_up_percent


@dataclass
class GradeProgressSummary:
    completed: int = 0
    total: int = 0
    percentage: int = 0


def get_today_stats(progress: ProgressDocument, today: Optional[date] = None) -> TodayStats:
    """Today's study numbers; all zero if nothing was studied today."""
    if progress.last_study_date != today_iso(today):
        return TodayStats()

    # Per-day set counts, time and scores are not recorded in the document
    return TodayStats(learned_words=progress.total_words_learned)


def count_completed_sets(unit_progress: UnitProgress) -> int:
    return (
        len(unit_progress.vocabulary.completed_sets)
        + sum(len(g.completed_sets) for g in unit_progress.grammar.values())
        + len(unit_progress.reading.completed_sets)
    )


def get_grade_progress(
    progress: ProgressDocument, grade_id: str, units: List[TextbookUnit]
) -> GradeProgressSummary:
    """Completed over total sets for the units of a grade that have content.

    Each unit has 3 vocabulary sets, 2 per grammar point and 2 reading sets.
    """
    grade_progress = progress.grades.get(grade_id)
    if grade_progress is None:
        return GradeProgressSummary()

    summary = GradeProgressSummary()
    for unit in units:
        if unit.is_mock:
            continue
        summary.total += 3 + 2 * len(unit.grammar) + 2
        unit_progress = grade_progress.units.get(unit.id)
        if unit_progress:
            summary.completed += count_completed_sets(unit_progress)

    summary.percentage = round_half_up_percent(summary.completed, summary.total)
    return summary


def get_average_score(unit_progress: UnitProgress) -> int:
    """Average of all recorded set scores of a unit (0 when none)."""
    scores = list(unit_progress.vocabulary.scores.values())
    for grammar in unit_progress.grammar.values():
        scores.extend(grammar.scores.values())
    scores.extend(unit_progress.reading.scores.values())
    if not scores:
        return 0
    return round_half_up_percent(sum(scores), len(scores) * 100)
