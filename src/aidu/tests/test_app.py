"""Tests for the console application."""
from typing import Iterable, List
from unittest.mock import MagicMock, patch

import pytest

from aidu.app import AiduApp, build_parser, main
from aidu.exceptions import NotFoundError
from aidu.models.content_models import LearningArea
from aidu.services.curriculum_service import CurriculumService
from aidu.services.progress_store import ProgressStore
from aidu.services.question_source import StaticQuestionSource
from aidu.services.study_service import StudyService

UNIT_ID = "middle-1-lesson-1"


class Console:
    """Scripted input and captured output."""

    def __init__(self, answers: Iterable[str] = ()):
        self.answers = list(answers)
        self.lines: List[str] = []

    def input(self, prompt: str) -> str:
        return self.answers.pop(0)

    def output(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def make_app(store: ProgressStore, curriculum: CurriculumService, console: Console) -> AiduApp:
    app = AiduApp(input_func=console.input, output_func=console.output)
    app.study = StudyService(store, curriculum, StaticQuestionSource())
    app.running = True
    return app


def test_parser() -> None:
    """Test command line parsing."""
    parser = build_parser()

    args = parser.parse_args(["quiz", UNIT_ID, "grammar", "m1-l1-g1-set-a"])

    assert args.command == "quiz"
    assert args.unit_id == UNIT_ID
    assert args.area == "grammar"
    assert args.set_id == "m1-l1-g1-set-a"
    with pytest.raises(SystemExit):
        parser.parse_args(["quiz", UNIT_ID, "spelling", "x"])


def test_show_status(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test the status output for a new learner."""
    console = Console()
    app = make_app(store, curriculum, console)

    app.show_status()

    assert "학습한 단어: 0개" in console.text
    assert "다음 추천 학습: 중1 - Lesson 1 - 플래시카드로 외우기" in console.text


def test_run_flashcards(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test an interrupted flashcard pass."""
    console = Console(["f", "m", "r", "x", "q"])
    app = make_app(store, curriculum, console)

    app.run_flashcards(UNIT_ID)

    assert "일어나다" in console.text
    flashcards = store.get_flashcard_progress(UNIT_ID)
    assert flashcards.mastered_words == ["m1-l1-w1"]
    assert flashcards.review_words == ["m1-l1-w2"]
    assert "flashcard" not in store.get_unit_progress(UNIT_ID).vocabulary.completed_sets


@pytest.mark.asyncio
async def test_run_quiz(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test answering a reading quiz from the console."""
    console = Console(["9", "1", "1", "1"])
    app = make_app(store, curriculum, console)

    result = await app.run_quiz(UNIT_ID, LearningArea.READING, "reading-set-a")

    assert result.total == 3
    assert "잘못된 입력입니다." in console.text
    assert f"점수 {result.score}점" in console.text
    assert store.get_unit_progress(UNIT_ID).reading.completed_sets == ["reading-set-a"]


def test_reset(store: ProgressStore, curriculum: CurriculumService) -> None:
    """Test resetting progress from the console."""
    store.save_flashcard_progress("middle-1", UNIT_ID, ["m1-l1-w1"], [])
    console = Console()
    app = make_app(store, curriculum, console)

    app.reset()

    assert store.get_unit_progress(UNIT_ID) is None


def test_stop() -> None:
    """Test stopping the application."""
    app = AiduApp()
    app.study = MagicMock()
    app.running = True

    app.stop()

    assert not app.running
    assert app.study is None


@patch("aidu.app.setup_logging")
@patch("aidu.app.ensure_directories")
@patch("aidu.app.AiduApp")
def test_main_runs_command(mock_app_class, mock_dirs, mock_logging) -> None:
    """Test dispatching a command."""
    app = mock_app_class.return_value

    assert main(["flashcards", UNIT_ID]) == 0

    app.start.assert_called_once()
    app.run_flashcards.assert_called_once_with(UNIT_ID)
    app.stop.assert_called_once()


@patch("aidu.app.setup_logging")
@patch("aidu.app.ensure_directories")
@patch("aidu.app.AiduApp")
def test_main_reports_errors(mock_app_class, mock_dirs, mock_logging) -> None:
    """Test that application errors give a non-zero exit code."""
    app = mock_app_class.return_value
    app.show_status.side_effect = NotFoundError("Unit missing")

    assert main(["status"]) == 1

    app.output.assert_called_once_with("오류: Unit missing")
    app.stop.assert_called_once()
