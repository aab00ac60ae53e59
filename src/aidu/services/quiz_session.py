"""Multiple-choice quiz pass over an ordered list of questions."""
import asyncio
import logging
from typing import Callable, List, Optional, Sequence, Union

from aidu.exceptions import NotFoundError
from aidu.models.quiz_models import (
    Answer,
    Question,
    QuizResult,
    round_half_up_percent,
    to_answer,
)

logger = logging.getLogger(__name__)


class QuizSession:
    """State machine for one quiz: select, submit, next, until a result.

    Invalid transitions (submitting twice, moving on before answering,
    anything after the result) are ignored rather than raised, since they
    come from repeated user input.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        on_finish: Optional[Callable[[QuizResult], None]] = None,
    ):
        if not questions:
            raise NotFoundError("No questions available for this quiz")

        self.questions: List[Question] = list(questions)
        self.on_finish = on_finish
        self.position = 0
        self.selected_answer: Optional[Answer] = None
        self.is_answered = False
        self.last_answer_correct: Optional[bool] = None
        self.correct_count = 0
        self.wrong_question_ids: List[str] = []
        self.elapsed_seconds = 0
        self.result: Optional[QuizResult] = None
        self._timer_task: Optional[asyncio.Task] = None

    @property
    def current_question(self) -> Question:
        return self.questions[self.position]

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.result is not None

    @property
    def progress_percent(self) -> int:
        return round(100 * self.position / self.total)

    def select_answer(self, value: Union[str, Sequence[str], Answer]) -> None:
        if self.is_answered or self.is_finished:
            return
        self.selected_answer = to_answer(value)

    def submit(self) -> None:
        if self.selected_answer is None or self.is_answered or self.is_finished:
            return

        self.is_answered = True
        question = self.current_question
        self.last_answer_correct = question.is_correct(self.selected_answer)
        if self.last_answer_correct:
            self.correct_count += 1
        else:
            self.wrong_question_ids.append(question.id)
        logger.debug(f"Question {question.id} answered, correct: {self.last_answer_correct}")

    def next(self) -> Optional[QuizResult]:
        """Move to the next question, or finish and return the result."""
        if not self.is_answered or self.is_finished:
            return None

        if self.position < self.total - 1:
            self.position += 1
            self.selected_answer = None
            self.is_answered = False
            self.last_answer_correct = None
            return None

        return self._finish()

    def tick(self) -> None:
        """Advance the elapsed time by one second."""
        if not self.is_finished:
            self.elapsed_seconds += 1

    def start_timer(self) -> None:
        """Start the one-second timer on the running event loop."""
        if self._timer_task is None and not self.is_finished:
            self._timer_task = asyncio.get_running_loop().create_task(self._run_timer())

    def stop_timer(self) -> None:
        if self._timer_task is not None:
            self._timer_task.cancel()
            self._timer_task = None

    async def _run_timer(self) -> None:
        while not self.is_finished:
            await asyncio.sleep(1)
            self.tick()

    def _finish(self) -> QuizResult:
        self.stop_timer()
        self.result = QuizResult(
            score=round_half_up_percent(self.correct_count, self.total),
            correct_count=self.correct_count,
            total=self.total,
            elapsed_seconds=self.elapsed_seconds,
            wrong_question_ids=list(self.wrong_question_ids),
        )
        logger.info(
            f"Quiz finished: {self.result.correct_count}/{self.result.total}, "
            f"score {self.result.score}, {self.result.elapsed_seconds}s"
        )
        if self.on_finish is not None:
            self.on_finish(self.result)
        return self.result
