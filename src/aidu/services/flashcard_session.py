"""Flashcard pass over a unit's word list."""
import logging
from typing import List, Optional, Sequence

from aidu.exceptions import NotFoundError
from aidu.models.content_models import Word
from aidu.monitoring import words_marked
from aidu.services.progress_store import ProgressStore
from aidu.services.speech_service import SpeechService

logger = logging.getLogger(__name__)


class FlashcardSession:
    """Drives one pass through a word list and classifies each word.

    Mastered and review lists are seeded from the stored progress and every
    classification is written back immediately. Mastery is sticky: a word
    marked for review after being mastered stays mastered.
    """

    def __init__(
        self,
        store: ProgressStore,
        grade_id: str,
        unit_id: str,
        words: Sequence[Word],
        speech: Optional[SpeechService] = None,
    ):
        if not words:
            raise NotFoundError(f"No words found for unit {unit_id}")

        self.store = store
        self.grade_id = grade_id
        self.unit_id = unit_id
        self.words: List[Word] = list(words)
        self.speech = speech
        self.position = 0
        self.is_flipped = False
        self.is_complete = False

        stored = store.get_flashcard_progress(unit_id)
        self.mastered_words: List[str] = list(stored.mastered_words) if stored else []
        self.review_words: List[str] = (
            [w for w in stored.review_words if w not in self.mastered_words] if stored else []
        )
        logger.debug(
            f"Flashcard session for unit {unit_id}: {len(self.words)} words, "
            f"{len(self.mastered_words)} mastered, {len(self.review_words)} to review"
        )

    @property
    def current_word(self) -> Word:
        return self.words[self.position]

    @property
    def total(self) -> int:
        return len(self.words)

    @property
    def progress_percent(self) -> int:
        return round(100 * len(self.mastered_words) / self.total)

    @property
    def is_current_mastered(self) -> bool:
        return self.current_word.id in self.mastered_words

    @property
    def is_current_review(self) -> bool:
        return self.current_word.id in self.review_words

    def flip(self) -> None:
        if self.is_complete:
            return
        self.is_flipped = not self.is_flipped

    def pronounce(self) -> None:
        """Read the current word aloud, if a speech service is attached."""
        if self.speech and not self.is_complete:
            self.speech.speak_english(self.current_word.english)

    def mark_mastered(self) -> None:
        if self.is_complete:
            return
        word_id = self.current_word.id
        if word_id not in self.mastered_words:
            self.mastered_words.append(word_id)
            self.review_words = [w for w in self.review_words if w != word_id]
            words_marked.labels(outcome="mastered").inc()
        self._persist()
        self.advance()

    def mark_needs_review(self) -> None:
        if self.is_complete:
            return
        word_id = self.current_word.id
        if word_id not in self.mastered_words and word_id not in self.review_words:
            self.review_words.append(word_id)
            words_marked.labels(outcome="review").inc()
        self._persist()
        self.advance()

    def advance(self) -> None:
        self.is_flipped = False
        if self.position >= len(self.words) - 1:
            self.is_complete = True
        else:
            self.position += 1

    def restart(self) -> None:
        """Go back to the first card, keeping the classified words."""
        self.position = 0
        self.is_flipped = False
        self.is_complete = False

    def finish(self, mark_set_complete: bool = True) -> None:
        """Persist the lists once more and optionally complete the flashcard set."""
        self._persist(is_completed=mark_set_complete)
        logger.info(
            f"Flashcard session for unit {self.unit_id} finished: "
            f"{len(self.mastered_words)} mastered, {len(self.review_words)} to review"
        )

    def _persist(self, is_completed: bool = False) -> None:
        self.store.save_flashcard_progress(
            self.grade_id,
            self.unit_id,
            self.mastered_words,
            self.review_words,
            is_completed=is_completed,
        )
