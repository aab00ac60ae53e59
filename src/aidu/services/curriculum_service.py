"""Lookup service for grades, units and their problem sets."""
import logging
from typing import Dict, List, Optional

from aidu.config import settings
from aidu.data.curriculum import ALL_UNITS, GRADES
from aidu.exceptions import NotFoundError
from aidu.models.content_models import Grade, LearningArea, SetDefinition, TextbookUnit
from aidu.services.unlock_policy import FLASHCARD_SET, READING_CHAIN, grammar_chain

logger = logging.getLogger(__name__)


def grade_id_for_unit(unit_id: str) -> str:
    """Grade id encoded in a unit id ("middle-1-lesson-1" -> "middle-1")."""
    return "-".join(unit_id.split("-")[:2])


class CurriculumService:
    """Service for looking up curriculum content."""

    def __init__(
        self,
        grades: Optional[List[Grade]] = None,
        units_by_grade: Optional[Dict[str, List[TextbookUnit]]] = None,
    ):
        self.grades = sorted(grades if grades is not None else GRADES, key=lambda g: g.order)
        self.units_by_grade = units_by_grade if units_by_grade is not None else ALL_UNITS

    def get_grade_by_id(self, grade_id: str) -> Optional[Grade]:
        return next((grade for grade in self.grades if grade.id == grade_id), None)

    def get_units_by_grade(self, grade_id: str) -> List[TextbookUnit]:
        return sorted(self.units_by_grade.get(grade_id, []), key=lambda u: u.order)

    def get_unit_by_id(self, unit_id: str) -> Optional[TextbookUnit]:
        for units in self.units_by_grade.values():
            for unit in units:
                if unit.id == unit_id:
                    return unit
        return None

    def require_unit(self, unit_id: str) -> TextbookUnit:
        """Get a unit or raise NotFoundError."""
        unit = self.get_unit_by_id(unit_id)
        if unit is None:
            logger.warning(f"Unit {unit_id} not found")
            raise NotFoundError(f"Unit {unit_id} not found")
        return unit

    def list_sets(self, unit: TextbookUnit) -> List[SetDefinition]:
        """Problem sets of a unit in study order."""
        vocab_count = settings.learning.vocab_question_count
        grammar_count = settings.learning.grammar_question_count
        reading_count = settings.learning.reading_question_count

        sets = [
            SetDefinition(FLASHCARD_SET, "플래시카드로 외우기", LearningArea.VOCABULARY,
                          "단어장을 카드로 외우세요", len(unit.words)),
            SetDefinition("vocab-set-a", "Set A: 단어 테스트", LearningArea.VOCABULARY,
                          "영→한, 한→영 기본 테스트", vocab_count),
            SetDefinition("vocab-set-b", "Set B: 예문 완성", LearningArea.VOCABULARY,
                          "문맥 속 단어 활용", vocab_count),
        ]

        for grammar in unit.grammar:
            set_a, set_b = grammar_chain(grammar.id)
            sets.append(SetDefinition(set_a, f"{grammar.korean_name} Set A: 기본 문제",
                                      LearningArea.GRAMMAR, grammar.grammar_point,
                                      grammar_count, grammar.id))
            sets.append(SetDefinition(set_b, f"{grammar.korean_name} Set B: 응용 문제",
                                      LearningArea.GRAMMAR, grammar.grammar_point,
                                      grammar_count, grammar.id))

        sets.append(SetDefinition(READING_CHAIN[0], "Set A: 내용 이해", LearningArea.READING,
                                  "지문 읽고 문제 풀기", reading_count))
        sets.append(SetDefinition(READING_CHAIN[1], "Set B: 추론 및 어휘", LearningArea.READING,
                                  "심화 독해 문제", reading_count))
        return sets
