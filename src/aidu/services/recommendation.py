"""Selection of the next suggested activity."""
import logging
from typing import Optional

from aidu.models.progress_models import ProgressDocument
from aidu.models.quiz_models import NextRecommendation
from aidu.services.curriculum_service import CurriculumService
from aidu.services.unlock_policy import is_completed, is_unlocked

logger = logging.getLogger(__name__)


def get_next_recommendation(
    progress: ProgressDocument, curriculum: CurriculumService
) -> Optional[NextRecommendation]:
    """First unlocked but incomplete set, scanning grades and units in order.

    Units without content are skipped. Returns None when everything is done.
    """
    for grade in curriculum.grades:
        for unit in curriculum.get_units_by_grade(grade.id):
            if unit.is_mock:
                continue
            unit_progress = progress.find_unit(unit.id)
            for set_def in curriculum.list_sets(unit):
                if is_completed(set_def.id, unit_progress):
                    continue
                if not is_unlocked(set_def.id, unit_progress):
                    continue
                logger.debug(f"Recommending {set_def.id} of unit {unit.id}")
                return NextRecommendation(
                    type=set_def.area.value,
                    grade_id=grade.id,
                    unit_id=unit.id,
                    set_id=set_def.id,
                    message=f"{grade.short_name} - Lesson {unit.order} - {set_def.name}",
                )
    return None
