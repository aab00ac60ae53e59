"""Console application entry point."""
import argparse
import asyncio
import logging
from typing import Callable, List, Optional

from aidu.config import ensure_directories, settings
from aidu.exceptions import AiduError
from aidu.logging_config import setup_logging
from aidu.models.base import SessionLocal, init_db
from aidu.models.content_models import LearningArea
from aidu.models.quiz_models import QuizResult, score_grade
from aidu.monitoring import start_monitoring
from aidu.services.curriculum_service import CurriculumService
from aidu.services.progress_store import ProgressStore
from aidu.services.question_source import build_question_source
from aidu.services.speech_service import SpeechService
from aidu.services.study_service import StudyService


class AiduApp:
    """Main application class."""

    def __init__(self, input_func: Callable[[str], str] = input, output_func: Callable[[str], None] = print):
        """Initialize the application."""
        self.input = input_func
        self.output = output_func
        self.study: Optional[StudyService] = None
        self.running = False
        self.logger = logging.getLogger(__name__)

    def start(self) -> None:
        """Start the application."""
        if self.running:
            return

        init_db()
        self.logger.info("Database initialized")

        if settings.monitoring.port:
            start_monitoring(settings.monitoring.port)
            self.logger.info(f"Metrics exported on port {settings.monitoring.port}")

        self.study = StudyService(
            ProgressStore(SessionLocal),
            CurriculumService(),
            build_question_source(settings.ai),
            SpeechService(),
        )
        self.running = True
        self.logger.info("Application started")

    def stop(self) -> None:
        """Stop the application."""
        if not self.running:
            return
        self.study = None
        self.running = False
        self.logger.info("Application stopped")

    def show_status(self) -> None:
        dashboard = self.study.get_dashboard()
        progress = dashboard.progress
        self.output(f"학습한 단어: {progress.total_words_learned}개, 연속 학습: {progress.streak_days}일")
        self.output(f"오늘 학습한 단어: {dashboard.today.learned_words}개")
        if dashboard.recommendation:
            self.output(f"다음 추천 학습: {dashboard.recommendation.message}")
        else:
            self.output("모든 학습을 완료했습니다!")

    def reset(self) -> None:
        self.study.store.reset()
        self.output("진행상황이 초기화되었습니다.")

    def run_flashcards(self, unit_id: str) -> None:
        session = self.study.start_flashcard_session(unit_id)
        while not session.is_complete:
            word = session.current_word
            self.output(f"[{session.position + 1}/{session.total}] {word.english}")
            choice = self.input("(f) 뒤집기, (s) 발음, (m) 외웠어요, (r) 복습 필요, (q) 그만: ").strip().lower()
            if choice == "f":
                session.flip()
                if session.is_flipped:
                    self.output(f"  {word.korean} - {word.example_sentence} ({word.example_translation})")
            elif choice == "s":
                session.pronounce()
            elif choice == "m":
                session.mark_mastered()
            elif choice == "r":
                session.mark_needs_review()
            elif choice == "q":
                break
        session.finish(mark_set_complete=session.is_complete)
        self.output(f"외운 단어 {len(session.mastered_words)}개, 복습 필요 {len(session.review_words)}개")

    async def run_quiz(self, unit_id: str, area: LearningArea, set_id: str) -> QuizResult:
        session = await self.study.start_quiz_session(unit_id, area, set_id)
        session.start_timer()
        try:
            while not session.is_finished:
                question = session.current_question
                self.output(f"[{session.position + 1}/{session.total}] {question.prompt}")
                for index, option in enumerate(question.options, start=1):
                    self.output(f"  {index}. {option}")
                raw = await asyncio.to_thread(self.input, "번호를 입력하세요: ")
                try:
                    session.select_answer(question.options[int(raw) - 1])
                except (ValueError, IndexError):
                    self.output("잘못된 입력입니다.")
                    continue
                session.submit()
                self.output("정답입니다!" if session.last_answer_correct else "오답입니다.")
                if question.explanation:
                    self.output(f"  {question.explanation}")
                session.next()
        finally:
            session.stop_timer()

        result = session.result
        grade, message = score_grade(result.score)
        self.output(
            f"점수 {result.score}점 ({grade}) {message} "
            f"- {result.correct_count}/{result.total}, {result.elapsed_seconds // 60}분 {result.elapsed_seconds % 60}초"
        )
        return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aidu", description="AIDU English study console")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("status", help="Show progress and the next recommended set")
    subparsers.add_parser("reset", help="Delete all stored progress")
    flashcards = subparsers.add_parser("flashcards", help="Study a unit's words with flashcards")
    flashcards.add_argument("unit_id")
    quiz = subparsers.add_parser("quiz", help="Solve a problem set")
    quiz.add_argument("unit_id")
    quiz.add_argument("area", choices=[area.value for area in LearningArea])
    quiz.add_argument("set_id")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    ensure_directories()
    setup_logging("Starting AIDU English ...")

    app = AiduApp()
    app.start()
    try:
        if args.command == "status":
            app.show_status()
        elif args.command == "reset":
            app.reset()
        elif args.command == "flashcards":
            app.run_flashcards(args.unit_id)
        elif args.command == "quiz":
            asyncio.run(app.run_quiz(args.unit_id, LearningArea(args.area), args.set_id))
    except AiduError as e:
        app.logger.error(str(e))
        app.output(f"오류: {e}")
        return 1
    except KeyboardInterrupt:
        app.logger.info("Received keyboard interrupt, shutting down...")
    finally:
        app.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
