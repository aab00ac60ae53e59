"""Tests for the study service."""
import asyncio
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest

from aidu.exceptions import NotFoundError, SessionInProgressError
from aidu.models.content_models import LearningArea
from aidu.models.quiz_models import Question, SetStatus, SingleAnswer
from aidu.services.curriculum_service import CurriculumService
from aidu.services.progress_store import ProgressStore
from aidu.services.question_source import StaticQuestionSource
from aidu.services.study_service import StudyService

UNIT_ID = "middle-1-lesson-1"


def make_questions(count: int) -> List[Question]:
    return [
        Question(
            id=f"{UNIT_ID}-q{i}",
            type="multiple-choice",
            prompt=f"Question {i}?",
            options=["a", "b", "c", "d"],
            correct_answer=SingleAnswer("a"),
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def question_source() -> AsyncMock:
    """Create a question source returning ten questions."""
    source = AsyncMock()
    source.generate.return_value = make_questions(10)
    return source


@pytest.fixture
def study(store: ProgressStore, curriculum: CurriculumService, question_source: AsyncMock) -> StudyService:
    return StudyService(store, curriculum, question_source)


def test_start_flashcard_session(study: StudyService) -> None:
    """Test starting flashcards for a unit."""
    session = study.start_flashcard_session(UNIT_ID)

    assert session.total == 20
    assert session.grade_id == "middle-1"
    assert session.current_word.id == "m1-l1-w1"


def test_start_flashcard_session_unknown_unit(study: StudyService) -> None:
    """Test that unknown units raise NotFoundError."""
    with pytest.raises(NotFoundError):
        study.start_flashcard_session("middle-1-lesson-99")


def test_start_flashcard_session_mock_unit(study: StudyService, store: ProgressStore) -> None:
    """Test that units without words cannot be studied."""
    with pytest.raises(NotFoundError):
        study.start_flashcard_session("middle-1-lesson-2")

    assert store.load().grades == {}


@pytest.mark.asyncio
async def test_grammar_quiz_records_result(study: StudyService, store: ProgressStore) -> None:
    """Test finishing a grammar set with six of ten correct."""
    session = await study.start_quiz_session(UNIT_ID, LearningArea.GRAMMAR, "m1-l1-g1-set-a")

    for index in range(10):
        session.select_answer("a" if index < 6 else "b")
        session.submit()
        session.next()

    assert session.result.score == 60
    grammar = store.get_unit_progress(UNIT_ID).grammar["m1-l1-g1"]
    assert grammar.completed_sets == ["m1-l1-g1-set-a"]
    assert grammar.scores == {"m1-l1-g1-set-a": 60}
    assert grammar.wrong_problems == [f"{UNIT_ID}-q{i}" for i in range(7, 11)]

    overview = {item.definition.id: item for item in study.get_unit_overview(UNIT_ID)}
    assert overview["m1-l1-g1-set-b"].status == SetStatus.AVAILABLE
    assert overview["m1-l1-g1-set-a"].status == SetStatus.COMPLETED
    assert overview["m1-l1-g1-set-a"].score == 60
    assert overview["m1-l1-g2-set-b"].status == SetStatus.LOCKED


@pytest.mark.asyncio
async def test_quiz_uses_configured_question_count(study: StudyService, question_source: AsyncMock) -> None:
    """Test the material and count passed to the question source."""
    await study.start_quiz_session(UNIT_ID, LearningArea.READING, "reading-set-a")

    material, count = question_source.generate.call_args.args
    assert material.key == f"{UNIT_ID}-reading-set-a"
    assert material.area == LearningArea.READING
    assert count == 5


@pytest.mark.asyncio
async def test_quiz_with_static_questions(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test a vocabulary quiz with the static question source."""
    study = StudyService(store, curriculum, StaticQuestionSource())

    session = await study.start_quiz_session(UNIT_ID, LearningArea.VOCABULARY, "vocab-set-a")

    assert session.total == 10


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "area, set_id",
    [
        (LearningArea.GRAMMAR, "vocab-set-a"),
        (LearningArea.VOCABULARY, "reading-set-a"),
        (LearningArea.GRAMMAR, "m1-l1-g9-set-a"),
        (LearningArea.READING, "bogus"),
    ],
)
async def test_quiz_rejects_unknown_sets(study: StudyService, area: LearningArea, set_id: str) -> None:
    """Test that mismatched or unknown sets raise NotFoundError."""
    with pytest.raises(NotFoundError):
        await study.start_quiz_session(UNIT_ID, area, set_id)


@pytest.mark.asyncio
async def test_quiz_without_questions(study: StudyService, question_source: AsyncMock) -> None:
    """Test that a failing question source gives NotFoundError."""
    question_source.generate.side_effect = RuntimeError("offline")

    with pytest.raises(NotFoundError):
        await study.start_quiz_session(UNIT_ID, LearningArea.VOCABULARY, "vocab-set-a")


@pytest.mark.asyncio
async def test_concurrent_quiz_start_rejected(study: StudyService, question_source: AsyncMock) -> None:
    """Test that a second start for the same unit is refused while loading."""
    release = asyncio.Event()

    async def slow_generate(material, count):
        await release.wait()
        return make_questions(count)

    question_source.generate.side_effect = slow_generate
    first = asyncio.create_task(study.start_quiz_session(UNIT_ID, LearningArea.VOCABULARY, "vocab-set-a"))
    await asyncio.sleep(0)

    with pytest.raises(SessionInProgressError):
        await study.start_quiz_session(UNIT_ID, LearningArea.READING, "reading-set-a")

    release.set()
    session = await first
    assert session.total == 10

    second = await study.start_quiz_session(UNIT_ID, LearningArea.READING, "reading-set-a")
    assert second.total == 5


def test_reading_quiz_records_score(study: StudyService, store: ProgressStore) -> None:
    """Test that a finished reading quiz is stored under the reading area."""
    session = asyncio.run(study.start_quiz_session(UNIT_ID, LearningArea.READING, "reading-set-a"))

    for _ in range(session.total):
        session.select_answer("a")
        session.submit()
        session.next()

    progress = store.load()
    assert progress.grades["middle-1"].units[UNIT_ID].reading.scores == {"reading-set-a": 100}


def test_dashboard(study: StudyService, store: ProgressStore) -> None:
    """Test the dashboard summary."""
    store.save_flashcard_progress("middle-1", UNIT_ID, ["m1-l1-w1", "m1-l1-w2"], [], is_completed=True)

    dashboard = study.get_dashboard()

    assert dashboard.progress.total_words_learned == 2
    assert dashboard.today.learned_words == 2
    assert dashboard.recommendation.set_id == "vocab-set-a"


def test_speech_passed_to_flashcards(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test that the speech service reaches flashcard sessions."""
    speech = MagicMock()
    study = StudyService(store, curriculum, StaticQuestionSource(), speech=speech)

    study.start_flashcard_session(UNIT_ID).pronounce()

    speech.speak_english.assert_called_once_with("wake up")
