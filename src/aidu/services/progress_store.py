"""Progress store: whole-document persistence of learner progress."""
import json
import logging
from datetime import date
from typing import Callable, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from aidu.config import settings
from aidu.models.content_models import LearningArea
from aidu.models.models import ProgressBlob
from aidu.models.progress_models import (
    ActivityProgress,
    FlashcardState,
    ProgressDocument,
    UnitProgress,
    now_iso,
    today_iso,
)
from aidu.monitoring import progress_saves, storage_errors
from aidu.services.unlock_policy import FLASHCARD_SET, grammar_id_of

logger = logging.getLogger(__name__)


class ProgressStore:
    """Best-effort cache of the progress document.

    The document lives in a single blob under a fixed key and is read,
    modified and written back as a whole. Storage failures are logged and
    never raised: losing progress is acceptable, crashing the caller is not.
    Not thread-safe; callers must not interleave read-modify-write cycles.
    """

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]],
        storage_key: str = settings.database.storage_key,
    ):
        """Initialize the store with a session factory (None means no storage)."""
        self.session_factory = session_factory
        self.storage_key = storage_key

    @staticmethod
    def default_progress(today: Optional[date] = None) -> ProgressDocument:
        """A fresh document: no grades, zero counters, today's date."""
        return ProgressDocument(last_study_date=today_iso(today))

    def load(self) -> ProgressDocument:
        """Return the stored document or a default one."""
        if self.session_factory is None:
            logger.warning("Progress storage is unavailable, using default progress")
            return self.default_progress()

        try:
            db = self.session_factory()
            try:
                blob = db.query(ProgressBlob).filter(ProgressBlob.key == self.storage_key).first()
                payload = blob.payload if blob else None
            finally:
                db.close()
        except SQLAlchemyError as e:
            storage_errors.labels(error_type="load").inc()
            logger.error(f"Failed to load progress: {e}")
            return self.default_progress()

        if not payload:
            return self.default_progress()

        try:
            return ProgressDocument.from_data(json.loads(payload))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            storage_errors.labels(error_type="parse").inc()
            logger.error(f"Failed to parse stored progress: {e}")
            return self.default_progress()

    def save(self, progress: ProgressDocument) -> None:
        """Overwrite the stored document."""
        if self.session_factory is None:
            logger.debug("Progress storage is unavailable, skipping save")
            return

        try:
            payload = json.dumps(progress.to_data(), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            storage_errors.labels(error_type="serialize").inc()
            logger.error(f"Failed to serialize progress: {e}")
            return

        try:
            db = self.session_factory()
            try:
                blob = db.query(ProgressBlob).filter(ProgressBlob.key == self.storage_key).first()
                if blob is None:
                    db.add(ProgressBlob(key=self.storage_key, payload=payload))
                else:
                    blob.payload = payload
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise
            finally:
                db.close()
            progress_saves.inc()
        except SQLAlchemyError as e:
            storage_errors.labels(error_type="save").inc()
            logger.error(f"Failed to save progress: {e}")

    def reset(self) -> None:
        """Delete the stored document."""
        if self.session_factory is None:
            return

        try:
            db = self.session_factory()
            try:
                db.query(ProgressBlob).filter(ProgressBlob.key == self.storage_key).delete()
                db.commit()
            finally:
                db.close()
            logger.info("Progress reset")
        except SQLAlchemyError as e:
            storage_errors.labels(error_type="reset").inc()
            logger.error(f"Failed to reset progress: {e}")

    def get_unit_progress(self, unit_id: str) -> Optional[UnitProgress]:
        """Progress of a unit in any grade, or None if it was never touched."""
        return self.load().find_unit(unit_id)

    def get_flashcard_progress(self, unit_id: str) -> Optional[FlashcardState]:
        unit_progress = self.get_unit_progress(unit_id)
        return unit_progress.vocabulary.flashcard_progress if unit_progress else None

    def save_flashcard_progress(
        self,
        grade_id: str,
        unit_id: str,
        mastered_words: Iterable[str],
        review_words: Iterable[str],
        is_completed: bool = False,
    ) -> ProgressDocument:
        """Replace both flashcard buckets of a unit.

        ``total_words_learned`` becomes the size of this unit's mastered
        list, not a running total over all units.
        """
        progress = self.load()
        unit_progress = progress.unit(grade_id, unit_id)
        mastered: List[str] = list(mastered_words)
        unit_progress.vocabulary.flashcard_progress = FlashcardState(
            mastered_words=mastered,
            review_words=list(review_words),
            last_review=now_iso(),
        )

        if is_completed and FLASHCARD_SET not in unit_progress.vocabulary.completed_sets:
            unit_progress.vocabulary.completed_sets.append(FLASHCARD_SET)

        progress.total_words_learned = len(mastered)
        progress.last_study_date = today_iso()

        self.save(progress)
        return progress

    def mark_set_completed(
        self,
        grade_id: str,
        unit_id: str,
        set_id: str,
        area: LearningArea,
        score: int,
        wrong_problem_ids: Iterable[str] = (),
    ) -> ProgressDocument:
        """Record a finished set: append it once, keep the latest score, merge wrong ids."""
        area = LearningArea(area)
        progress = self.load()
        unit_progress = progress.unit(grade_id, unit_id)

        activity: ActivityProgress
        if area == LearningArea.VOCABULARY:
            activity = unit_progress.vocabulary
        elif area == LearningArea.READING:
            activity = unit_progress.reading
        else:
            grammar_id = grammar_id_of(set_id)
            if not grammar_id:
                raise ValueError(f"Set {set_id} is not a grammar set")
            activity = unit_progress.grammar_point(grammar_id)

        activity.record_completion(set_id, int(score), wrong_problem_ids)
        progress.last_study_date = today_iso()

        self.save(progress)
        logger.info(f"Set {set_id} of unit {unit_id} completed with score {score}")
        return progress

    def update_streak(self, today: Optional[date] = None) -> ProgressDocument:
        """Extend or restart the study streak based on the last study date."""
        today = today or date.today()
        progress = self.load()
        try:
            last_study = date.fromisoformat(progress.last_study_date)
        except ValueError:
            logger.warning(f"Invalid last study date: {progress.last_study_date}")
            last_study = today

        diff_days = (today - last_study).days
        if diff_days == 1:
            progress.streak_days += 1
        elif diff_days > 1:
            progress.streak_days = 1

        progress.last_study_date = today.isoformat()
        self.save(progress)
        return progress
