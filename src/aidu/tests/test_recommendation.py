"""Tests for next-activity recommendations."""
from aidu.models.progress_models import ProgressDocument
from aidu.services.curriculum_service import CurriculumService
from aidu.services.recommendation import get_next_recommendation

GRADE_ID = "middle-1"
UNIT_ID = "middle-1-lesson-1"


def test_fresh_progress_recommends_flashcards(curriculum: CurriculumService) -> None:
    """Test the first recommendation for a new learner."""
    recommendation = get_next_recommendation(ProgressDocument(), curriculum)

    assert recommendation.unit_id == UNIT_ID
    assert recommendation.set_id == "flashcard"
    assert recommendation.type == "vocabulary"
    assert recommendation.message == "중1 - Lesson 1 - 플래시카드로 외우기"


def test_next_set_in_chain(curriculum: CurriculumService) -> None:
    """Test that the next vocabulary set follows the flashcards."""
    progress = ProgressDocument()
    progress.unit(GRADE_ID, UNIT_ID).vocabulary.completed_sets.append("flashcard")

    recommendation = get_next_recommendation(progress, curriculum)

    assert recommendation.set_id == "vocab-set-a"
    assert recommendation.message == "중1 - Lesson 1 - Set A: 단어 테스트"


def test_moves_to_grammar_after_vocabulary(curriculum: CurriculumService) -> None:
    """Test that finished areas are skipped."""
    progress = ProgressDocument()
    progress.unit(GRADE_ID, UNIT_ID).vocabulary.completed_sets.extend(
        ["flashcard", "vocab-set-a", "vocab-set-b"]
    )

    recommendation = get_next_recommendation(progress, curriculum)

    assert recommendation.set_id == "m1-l1-g1-set-a"
    assert recommendation.type == "grammar"


def test_none_when_everything_completed(curriculum: CurriculumService) -> None:
    """Test that a fully completed curriculum gives no recommendation."""
    progress = ProgressDocument()
    unit_progress = progress.unit(GRADE_ID, UNIT_ID)
    unit_progress.vocabulary.completed_sets.extend(["flashcard", "vocab-set-a", "vocab-set-b"])
    for grammar_id in ("m1-l1-g1", "m1-l1-g2"):
        unit_progress.grammar_point(grammar_id).completed_sets.extend(
            [f"{grammar_id}-set-a", f"{grammar_id}-set-b"]
        )
    unit_progress.reading.completed_sets.extend(["reading-set-a", "reading-set-b"])

    assert get_next_recommendation(progress, curriculum) is None


def test_recommendation_does_not_modify_progress(curriculum: CurriculumService) -> None:
    """Test that recommending is read-only."""
    progress = ProgressDocument()

    get_next_recommendation(progress, curriculum)

    assert progress.grades == {}
