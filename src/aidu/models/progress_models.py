"""Models for the learner progress document."""
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any, Dict, List, Optional


def today_iso(today: Optional[date] = None) -> str:
    """Return a YYYY-MM-DD string for today (or the given date)."""
    return (today or date.today()).isoformat()


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _append_unique(items: List[str], new_items) -> None:
    for item in new_items:
        if item not in items:
            items.append(item)


@dataclass
class FlashcardState:
    """Mastered and review buckets for one unit's flashcards."""
    mastered_words: List[str] = field(default_factory=list)
    review_words: List[str] = field(default_factory=list)
    last_review: str = field(default_factory=now_iso)

    def to_data(self) -> Dict[str, Any]:
        return {
            "masteredWords": list(self.mastered_words),
            "reviewWords": list(self.review_words),
            "lastReview": self.last_review,
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "FlashcardState":
        return cls(
            mastered_words=[str(w) for w in data.get("masteredWords", [])],
            review_words=[str(w) for w in data.get("reviewWords", [])],
            last_review=data.get("lastReview") or now_iso(),
        )


@dataclass
class ActivityProgress:
    """Completion record for one grammar point or the reading section."""
    completed_sets: List[str] = field(default_factory=list)
    scores: Dict[str, int] = field(default_factory=dict)
    wrong_problems: List[str] = field(default_factory=list)
    reading_time: Optional[int] = None

    def record_completion(self, set_id: str, score: int, wrong_ids=()) -> None:
        """Append the set once, keep only the latest score and merge wrong ids."""
        _append_unique(self.completed_sets, [set_id])
        self.scores[set_id] = score
        _append_unique(self.wrong_problems, wrong_ids)

    def to_data(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "completedSets": list(self.completed_sets),
            "scores": dict(self.scores),
            "wrongProblems": list(self.wrong_problems),
        }
        if self.reading_time is not None:
            data["readingTime"] = self.reading_time
        return data

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "ActivityProgress":
        reading_time = data.get("readingTime")
        return cls(
            completed_sets=[str(s) for s in data.get("completedSets", [])],
            scores={str(k): int(v) for k, v in data.get("scores", {}).items()},
            wrong_problems=[str(p) for p in data.get("wrongProblems", [])],
            reading_time=int(reading_time) if reading_time is not None else None,
        )


@dataclass
class VocabularyProgress(ActivityProgress):
    """Vocabulary completion record plus flashcard buckets."""
    flashcard_progress: FlashcardState = field(default_factory=FlashcardState)

    def to_data(self) -> Dict[str, Any]:
        data = {"flashcardProgress": self.flashcard_progress.to_data()}
        data.update(super().to_data())
        return data

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "VocabularyProgress":
        base = ActivityProgress.from_data(data)
        return cls(
            completed_sets=base.completed_sets,
            scores=base.scores,
            wrong_problems=base.wrong_problems,
            flashcard_progress=FlashcardState.from_data(data.get("flashcardProgress", {})),
        )


@dataclass
class UnitProgress:
    """Progress for the three learning areas of one unit."""
    vocabulary: VocabularyProgress = field(default_factory=VocabularyProgress)
    grammar: Dict[str, ActivityProgress] = field(default_factory=dict)
    reading: ActivityProgress = field(default_factory=ActivityProgress)

    def grammar_point(self, grammar_id: str) -> ActivityProgress:
        """Get the progress for a grammar point, creating it on first use."""
        if grammar_id not in self.grammar:
            self.grammar[grammar_id] = ActivityProgress()
        return self.grammar[grammar_id]

    def to_data(self) -> Dict[str, Any]:
        return {
            "vocabulary": self.vocabulary.to_data(),
            "grammar": {gid: g.to_data() for gid, g in self.grammar.items()},
            "reading": self.reading.to_data(),
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "UnitProgress":
        return cls(
            vocabulary=VocabularyProgress.from_data(data.get("vocabulary", {})),
            grammar={
                str(gid): ActivityProgress.from_data(g)
                for gid, g in data.get("grammar", {}).items()
            },
            reading=ActivityProgress.from_data(data.get("reading", {})),
        )


@dataclass
class GradeProgress:
    """Progress for the units of one grade."""
    units: Dict[str, UnitProgress] = field(default_factory=dict)

    def to_data(self) -> Dict[str, Any]:
        return {"units": {uid: u.to_data() for uid, u in self.units.items()}}

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "GradeProgress":
        return cls(
            units={str(uid): UnitProgress.from_data(u) for uid, u in data.get("units", {}).items()}
        )


@dataclass
class ProgressDocument:
    """All progress of the (single) learner."""
    user_id: str = "guest"
    grades: Dict[str, GradeProgress] = field(default_factory=dict)
    total_words_learned: int = 0
    streak_days: int = 0
    last_study_date: str = field(default_factory=today_iso)

    def unit(self, grade_id: str, unit_id: str) -> UnitProgress:
        """Get the progress of a unit, materializing grade and unit entries."""
        grade = self.grades.setdefault(grade_id, GradeProgress())
        if unit_id not in grade.units:
            grade.units[unit_id] = UnitProgress()
        return grade.units[unit_id]

    def find_unit(self, unit_id: str) -> Optional[UnitProgress]:
        """Find a unit's progress in any grade without creating it."""
        for grade in self.grades.values():
            if unit_id in grade.units:
                return grade.units[unit_id]
        return None

    def to_data(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "grades": {gid: g.to_data() for gid, g in self.grades.items()},
            "totalWordsLearned": self.total_words_learned,
            "streakDays": self.streak_days,
            "lastStudyDate": self.last_study_date,
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "ProgressDocument":
        if not isinstance(data, dict):
            raise TypeError(f"Progress document must be an object, got {type(data).__name__}")
        return cls(
            user_id=str(data.get("userId", "guest")),
            grades={str(gid): GradeProgress.from_data(g) for gid, g in data.get("grades", {}).items()},
            total_words_learned=int(data.get("totalWordsLearned", 0)),
            streak_days=int(data.get("streakDays", 0)),
            last_study_date=str(data.get("lastStudyDate") or today_iso()),
        )
