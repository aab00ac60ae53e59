"""Study service tying content, question sources, sessions and progress together."""
import logging
from dataclasses import dataclass
from typing import List, Optional, Set

from aidu.config import settings
from aidu.exceptions import NotFoundError, SessionInProgressError
from aidu.models.content_models import LearningArea, SetDefinition
from aidu.models.progress_models import ProgressDocument
from aidu.models.quiz_models import NextRecommendation, QuizResult, SetStatus, TodayStats
from aidu.monitoring import quiz_duration, quiz_scores, sets_completed, study_sessions
from aidu.services.curriculum_service import CurriculumService, grade_id_for_unit
from aidu.services.flashcard_session import FlashcardSession
from aidu.services.progress_store import ProgressStore
from aidu.services.question_source import QuestionSource, SourceMaterial
from aidu.services.quiz_session import QuizSession
from aidu.services.recommendation import get_next_recommendation
from aidu.services.speech_service import SpeechService
from aidu.services.stats_service import get_today_stats
from aidu.services.unlock_policy import area_of, grammar_id_of, set_status

logger = logging.getLogger(__name__)


@dataclass
class SetOverview:
    definition: SetDefinition
    status: SetStatus
    score: Optional[int] = None


@dataclass
class Dashboard:
    progress: ProgressDocument
    today: TodayStats
    recommendation: Optional[NextRecommendation]


class StudyService:
    """Service for starting study sessions and reading progress summaries."""

    def __init__(
        self,
        store: ProgressStore,
        curriculum: CurriculumService,
        question_source: QuestionSource,
        speech: Optional[SpeechService] = None,
    ):
        """Initialize the service with its collaborators."""
        self.store = store
        self.curriculum = curriculum
        self.question_source = question_source
        self.speech = speech
        self._starting_units: Set[str] = set()

    def start_flashcard_session(self, unit_id: str) -> FlashcardSession:
        """Start a flashcard pass over the unit's core words."""
        unit = self.curriculum.require_unit(unit_id)
        if not unit.words:
            raise NotFoundError(f"No words found for unit {unit_id}")
        # Streak must be updated before the session writes today's date
        self.store.update_streak()
        session = FlashcardSession(
            self.store, grade_id_for_unit(unit.id), unit.id, unit.words, speech=self.speech
        )
        study_sessions.labels(area="flashcard").inc()
        return session

    async def start_quiz_session(self, unit_id: str, area: LearningArea, set_id: str) -> QuizSession:
        """Load questions for a set and return a quiz that records its result once."""
        area = LearningArea(area)
        unit = self.curriculum.require_unit(unit_id)
        if area_of(set_id) != area:
            raise NotFoundError(f"Set {set_id} is not a {area.value} set")

        if area == LearningArea.VOCABULARY:
            material = SourceMaterial.for_vocabulary(unit, set_id)
            count = settings.learning.vocab_question_count
        elif area == LearningArea.GRAMMAR:
            grammar = unit.get_grammar(grammar_id_of(set_id))
            if grammar is None:
                raise NotFoundError(f"Grammar point for set {set_id} not found in unit {unit_id}")
            material = SourceMaterial.for_grammar(unit, grammar, set_id)
            count = settings.learning.grammar_question_count
        else:
            material = SourceMaterial.for_reading(unit, set_id)
            count = settings.learning.reading_question_count

        if unit.id in self._starting_units:
            raise SessionInProgressError(f"A session for unit {unit.id} is already starting")

        self._starting_units.add(unit.id)
        try:
            questions = await self.question_source.generate(material, count)
        except Exception as e:
            logger.error(f"Failed to load questions for {material.key}: {e}")
            questions = []
        finally:
            self._starting_units.discard(unit.id)

        grade_id = grade_id_for_unit(unit.id)

        def commit(result: QuizResult) -> None:
            self.store.update_streak()
            self.store.mark_set_completed(
                grade_id, unit.id, set_id, area, result.score, result.wrong_question_ids
            )
            sets_completed.labels(area=area.value).inc()
            quiz_scores.labels(area=area.value).observe(result.score)
            quiz_duration.labels(area=area.value).observe(result.elapsed_seconds)

        session = QuizSession(questions, on_finish=commit)
        study_sessions.labels(area=area.value).inc()
        logger.info(f"Quiz {set_id} for unit {unit.id} started with {session.total} questions")
        return session

    def get_unit_overview(self, unit_id: str) -> List[SetOverview]:
        """All sets of a unit with their lock status and latest score."""
        unit = self.curriculum.require_unit(unit_id)
        unit_progress = self.store.get_unit_progress(unit.id)
        overview = []
        for set_def in self.curriculum.list_sets(unit):
            score = None
            if unit_progress is not None:
                if set_def.area == LearningArea.VOCABULARY:
                    score = unit_progress.vocabulary.scores.get(set_def.id)
                elif set_def.area == LearningArea.READING:
                    score = unit_progress.reading.scores.get(set_def.id)
                elif set_def.grammar_id in unit_progress.grammar:
                    score = unit_progress.grammar[set_def.grammar_id].scores.get(set_def.id)
            overview.append(SetOverview(set_def, set_status(set_def.id, unit_progress), score))
        return overview

    def get_dashboard(self) -> Dashboard:
        progress = self.store.load()
        return Dashboard(
            progress=progress,
            today=get_today_stats(progress),
            recommendation=get_next_recommendation(progress, self.curriculum),
        )
