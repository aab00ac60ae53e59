"""Models for quiz questions, answers and results."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union


class SetStatus(Enum):
    """Display status of a problem set."""
    LOCKED = "locked"
    AVAILABLE = "available"
    COMPLETED = "completed"


@dataclass(frozen=True)
class SingleAnswer:
    """An answer made of one value."""
    value: str

    def matches(self, other: "Answer") -> bool:
        return isinstance(other, SingleAnswer) and other.value == self.value


@dataclass(frozen=True)
class MultiAnswer:
    """An ordered answer for questions with several blanks."""
    values: Tuple[str, ...]

    def matches(self, other: "Answer") -> bool:
        return isinstance(other, MultiAnswer) and other.values == self.values


Answer = Union[SingleAnswer, MultiAnswer]


def to_answer(value: Union[str, Sequence[str], SingleAnswer, MultiAnswer]) -> Answer:
    """Wrap a raw value (string or list of strings) into an answer variant."""
    if isinstance(value, (SingleAnswer, MultiAnswer)):
        return value
    if isinstance(value, str):
        return SingleAnswer(value)
    return MultiAnswer(tuple(str(v) for v in value))


@dataclass
class Question:
    """A multiple-choice question produced by a question source."""
    id: str
    type: str
    prompt: str
    options: List[str]
    correct_answer: Answer
    explanation: Optional[str] = None

    def is_correct(self, selected: Answer) -> bool:
        return self.correct_answer.matches(selected)

    def to_data(self) -> Dict[str, Any]:
        if isinstance(self.correct_answer, MultiAnswer):
            correct: Any = list(self.correct_answer.values)
        else:
            correct = self.correct_answer.value
        data = {
            "id": self.id,
            "type": self.type,
            "question": self.prompt,
            "options": list(self.options),
            "correctAnswer": correct,
        }
        if self.explanation:
            data["explanation"] = self.explanation
        return data


def round_half_up_percent(numerator: int, denominator: int) -> int:
    """Percentage rounded half up, computed on integers."""
    if denominator <= 0:
        return 0
    return (200 * numerator + denominator) // (2 * denominator)


def score_grade(score: int) -> Tuple[str, str]:
    """Letter grade and encouragement message for a score."""
    if score >= 90:
        return "A+", "완벽합니다! 🎉"
    if score >= 80:
        return "A", "훌륭해요! 👏"
    if score >= 70:
        return "B+", "잘했어요! 👍"
    if score >= 60:
        return "B", "좋아요! 💪"
    if score >= 50:
        return "C", "조금만 더! 📚"
    return "D", "복습이 필요해요 🔄"


@dataclass
class QuizResult:
    """Terminal summary of one quiz pass."""
    score: int
    correct_count: int
    total: int
    elapsed_seconds: int
    wrong_question_ids: List[str] = field(default_factory=list)

    def passed(self, pass_score: int = 70) -> bool:
        return self.score >= pass_score

    @property
    def grade(self) -> str:
        return score_grade(self.score)[0]

    def to_query_params(self) -> Dict[str, str]:
        """Parameters used when the result crosses a page boundary."""
        return {
            "score": str(self.score),
            "correct": str(self.correct_count),
            "total": str(self.total),
            "time": str(self.elapsed_seconds),
            "wrong": ",".join(self.wrong_question_ids),
        }

    @classmethod
    def from_query_params(cls, params: Dict[str, str]) -> "QuizResult":
        def _int(name: str, default: int) -> int:
            try:
                return int(params.get(name) or default)
            except ValueError:
                return default

        wrong = params.get("wrong") or ""
        return cls(
            score=_int("score", 0),
            correct_count=_int("correct", 0),
            total=_int("total", 10),
            elapsed_seconds=_int("time", 0),
            wrong_question_ids=[w for w in wrong.split(",") if w],
        )


@dataclass
class NextRecommendation:
    type: str
    grade_id: str
    unit_id: str
    set_id: str
    message: str


@dataclass
class TodayStats:
    learned_words: int = 0
    completed_sets: int = 0
    study_time: int = 0
    average_score: int = 0
    current_unit: Optional[str] = None
