"""Question sources: generated by Gemini, or built from static content."""
import asyncio
import json
import logging
import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from aidu.config import AISettings, settings
from aidu.data.static_questions import GRAMMAR_QUESTIONS, READING_QUESTIONS
from aidu.exceptions import QuestionFormatError
from aidu.models.content_models import GrammarSection, LearningArea, TextbookUnit, Word
from aidu.models.quiz_models import MultiAnswer, Question, SingleAnswer
from aidu.monitoring import question_source_fallbacks, questions_generated

logger = logging.getLogger(__name__)

VOCAB_TYPES = ["eng-to-kor", "kor-to-eng", "fill-blank"]
MIXED = "mixed"


@dataclass
class SourceMaterial:
    """What questions are generated from."""
    key: str
    area: LearningArea
    words: List[Word] = field(default_factory=list)
    grammar: Optional[GrammarSection] = None
    passage: str = ""
    title: Optional[str] = None

    @classmethod
    def for_vocabulary(cls, unit: TextbookUnit, set_id: str) -> "SourceMaterial":
        return cls(key=f"{unit.id}-{set_id}", area=LearningArea.VOCABULARY, words=list(unit.words))

    @classmethod
    def for_grammar(cls, unit: TextbookUnit, grammar: GrammarSection, set_id: str) -> "SourceMaterial":
        return cls(key=f"{unit.id}-{set_id}", area=LearningArea.GRAMMAR, grammar=grammar)

    @classmethod
    def for_reading(cls, unit: TextbookUnit, set_id: str) -> "SourceMaterial":
        return cls(
            key=f"{unit.id}-{set_id}",
            area=LearningArea.READING,
            passage=unit.reading.passage,
            title=unit.reading.title,
        )


def question_from_data(data: Dict[str, Any], question_id: str) -> Question:
    """Validate one raw question object and convert it."""
    if not isinstance(data, dict):
        raise QuestionFormatError(f"Question must be an object, got {type(data).__name__}")

    prompt = data.get("question")
    if not isinstance(prompt, str) or not prompt.strip():
        raise QuestionFormatError("Question text is missing")

    options = data.get("options")
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise QuestionFormatError("Options must be a list of strings")
    if len(options) < 2 or len(set(options)) != len(options):
        raise QuestionFormatError("Options must contain at least two unique entries")

    correct = data.get("correctAnswer")
    if isinstance(correct, str):
        if correct not in options:
            raise QuestionFormatError(f"Correct answer {correct!r} is not one of the options")
        answer = SingleAnswer(correct)
    elif isinstance(correct, list) and correct and all(isinstance(c, str) for c in correct):
        missing = [c for c in correct if c not in options]
        if missing:
            raise QuestionFormatError(f"Correct answers {missing!r} are not among the options")
        answer = MultiAnswer(tuple(correct))
    else:
        raise QuestionFormatError("Correct answer is missing")

    explanation = data.get("explanation")
    return Question(
        id=question_id,
        type=str(data.get("type") or "multiple-choice"),
        prompt=prompt.strip(),
        options=list(options),
        correct_answer=answer,
        explanation=explanation if isinstance(explanation, str) else None,
    )


class QuestionSource(ABC):
    """Supplies an ordered list of questions for some source material."""

    name: str = "base"

    @abstractmethod
    async def generate(
        self, material: SourceMaterial, count: int, question_type: str = MIXED
    ) -> List[Question]:
        raise NotImplementedError("Subclasses must implement this method")


class StaticQuestionSource(QuestionSource):
    """Deterministic questions: the same material always yields the same quiz."""

    name = "static"

    def __init__(self, options_per_question: int = settings.learning.options_per_question):
        self.options_per_question = options_per_question

    async def generate(
        self, material: SourceMaterial, count: int, question_type: str = MIXED
    ) -> List[Question]:
        return self.build(material, count, question_type)

    def build(self, material: SourceMaterial, count: int, question_type: str = MIXED) -> List[Question]:
        if material.area == LearningArea.VOCABULARY:
            questions = self._vocabulary_questions(material, count, question_type)
        elif material.area == LearningArea.GRAMMAR:
            questions = self._bank_questions(material, GRAMMAR_QUESTIONS, count)
        else:
            questions = self._bank_questions(material, READING_QUESTIONS, count)
        questions_generated.labels(source=self.name).inc(len(questions))
        return questions

    def _bank_questions(self, material: SourceMaterial, bank: List[Dict[str, Any]], count: int) -> List[Question]:
        return [
            question_from_data(data, f"{material.key}-q{i + 1}")
            for i, data in enumerate(bank[:count])
        ]

    def _vocabulary_questions(self, material: SourceMaterial, count: int, question_type: str) -> List[Question]:
        rng = random.Random(material.key)
        words = rng.sample(material.words, min(count, len(material.words)))
        questions = []
        for index, word in enumerate(words):
            kind = VOCAB_TYPES[index % len(VOCAB_TYPES)] if question_type == MIXED else question_type
            data = self._vocabulary_item(word, material.words, kind, rng)
            if data is None:
                continue
            questions.append(question_from_data(data, f"{material.key}-q{len(questions) + 1}"))
        return questions

    def _vocabulary_item(self, word: Word, words: List[Word], kind: str, rng: random.Random) -> Optional[Dict[str, Any]]:
        if kind == "fill-blank":
            pattern = re.compile(re.escape(word.english), re.IGNORECASE)
            if not pattern.search(word.example_sentence):
                kind = "eng-to-kor"

        # kor-to-eng and fill-blank choose among English words
        use_english = kind in ("kor-to-eng", "fill-blank")
        correct = word.english if use_english else word.korean
        pool = sorted({(w.english if use_english else w.korean) for w in words} - {correct})
        distractors = rng.sample(pool, min(self.options_per_question - 1, len(pool)))
        if not distractors:
            return None
        options = distractors + [correct]
        rng.shuffle(options)

        if kind == "kor-to-eng":
            prompt = f'"{word.korean}"에 해당하는 영어 단어는?'
        elif kind == "fill-blank":
            prompt = f"빈칸에 들어갈 알맞은 단어는? \"{pattern.sub('____', word.example_sentence, count=1)}\""
        else:
            prompt = f'"{word.english}"의 뜻으로 알맞은 것은?'

        return {
            "type": kind,
            "question": prompt,
            "options": options,
            "correctAnswer": correct,
            "explanation": f"정답: {correct} ({word.example_sentence} / {word.example_translation})",
        }


VOCAB_PROMPT = """
다음 단어 목록을 사용하여 {count}개의 영어 단어 테스트 문제를 생성해주세요.

단어 목록:
{words}

문제 유형: {question_type}

요구사항:
1. 각 문제는 4개의 서로 다른 선택지를 가져야 합니다
2. 선택지는 제시된 단어 목록에서만 선택
3. correctAnswer는 선택지 중 하나와 정확히 같아야 합니다
4. JSON 배열 형식으로 반환
{schema}
JSON만 반환하고 다른 텍스트는 포함하지 마세요.
"""

GRAMMAR_PROMPT = """
다음 문법 포인트에 대한 {count}개의 테스트 문제를 생성해주세요.

문법 포인트: {grammar_point} ({korean_name})
설명: {explanation}
예문:
{examples}

문제 유형: 객관식(multiple-choice), 빈칸 채우기(fill-blank), 오류 찾기(error-correction)
모든 문제는 4개의 서로 다른 선택지를 가지며 correctAnswer는 선택지 중 하나와 정확히 같아야 합니다.
{schema}
JSON만 반환하고 다른 텍스트는 포함하지 마세요.
"""

READING_PROMPT = """
다음 영어 지문을 읽고 중학생 수준의 독해 문제 {count}개를 생성해주세요.

제목: {title}
지문:
{passage}

문제 유형: 주제(main-idea), 세부사항(detail), 추론(inference), 어휘(vocabulary), 목적(purpose)
모든 문제는 4개의 서로 다른 선택지를 가지며 correctAnswer는 선택지 중 하나와 정확히 같아야 합니다.
{schema}
JSON만 반환하고 다른 텍스트는 포함하지 마세요.
"""

QUESTION_SCHEMA = """
각 문제 구조:
{
  "id": "q1",
  "type": "문제 유형",
  "question": "문제 텍스트",
  "options": ["선택지1", "선택지2", "선택지3", "선택지4"],
  "correctAnswer": "정답",
  "explanation": "간단한 설명"
}
"""


class GeminiQuestionSource(QuestionSource):
    """Questions generated by Gemini, falling back to a static source on any failure."""

    name = "gemini"

    def __init__(
        self,
        ai_settings: AISettings,
        fallback: Optional[QuestionSource] = None,
        model: Any = None,
    ):
        self.ai_settings = ai_settings
        self.fallback = fallback or StaticQuestionSource()
        self._model = model

    @property
    def model(self) -> Any:
        if self._model is None:
            genai.configure(api_key=self.ai_settings.api_key)
            self._model = genai.GenerativeModel(
                self.ai_settings.model,
                generation_config={
                    "response_mime_type": "application/json",
                    "temperature": self.ai_settings.temperature,
                },
            )
            logger.info(f"Gemini model {self.ai_settings.model} initialized")
        return self._model

    def build_prompt(self, material: SourceMaterial, count: int, question_type: str = MIXED) -> str:
        if material.area == LearningArea.VOCABULARY:
            words = "\n".join(
                f"{i + 1}. {w.english} - {w.korean} (예문: {w.example_sentence})"
                for i, w in enumerate(material.words)
            )
            kind = "영→한, 한→영, 빈칸 채우기 혼합" if question_type == MIXED else question_type
            return VOCAB_PROMPT.format(count=count, words=words, question_type=kind, schema=QUESTION_SCHEMA)

        if material.area == LearningArea.GRAMMAR and material.grammar is not None:
            grammar = material.grammar
            return GRAMMAR_PROMPT.format(
                count=count,
                grammar_point=grammar.grammar_point,
                korean_name=grammar.korean_name,
                explanation=grammar.explanation,
                examples="\n".join(e.sentence for e in grammar.examples),
                schema=QUESTION_SCHEMA,
            )

        return READING_PROMPT.format(
            count=count,
            title=material.title or "",
            passage=material.passage,
            schema=QUESTION_SCHEMA,
        )

    @staticmethod
    def parse_response(text: str, material: SourceMaterial, count: int) -> List[Question]:
        """Extract and validate the JSON question array from a model response."""
        match = re.search(r"\[[\s\S]*\]", text or "")
        if not match:
            raise QuestionFormatError("Response does not contain a JSON array")
        try:
            items = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise QuestionFormatError(f"Invalid JSON in response: {e}") from e
        if not isinstance(items, list) or not items:
            raise QuestionFormatError("Response contains no questions")

        questions = []
        for index, item in enumerate(items[:count]):
            raw_id = item.get("id") if isinstance(item, dict) else None
            question_id = f"{material.key}-{raw_id or f'q{index + 1}'}"
            questions.append(question_from_data(item, question_id))

        if len({q.id for q in questions}) != len(questions):
            raise QuestionFormatError("Question ids are not unique")
        return questions

    def _generate_text(self, prompt: str) -> str:
        response = self.model.generate_content(prompt)
        return (getattr(response, "text", "") or "").strip()

    async def generate(
        self, material: SourceMaterial, count: int, question_type: str = MIXED
    ) -> List[Question]:
        prompt = self.build_prompt(material, count, question_type)
        try:
            text = await asyncio.to_thread(self._generate_text, prompt)
            questions = self.parse_response(text, material, count)
        except QuestionFormatError as e:
            question_source_fallbacks.labels(reason="malformed").inc()
            logger.warning(f"Gemini returned malformed questions for {material.key}: {e}")
            return await self.fallback.generate(material, count, question_type)
        except Exception as e:
            question_source_fallbacks.labels(reason="unavailable").inc()
            logger.error(f"Gemini API error for {material.key}: {e}")
            return await self.fallback.generate(material, count, question_type)

        questions_generated.labels(source=self.name).inc(len(questions))
        logger.info(f"Generated {len(questions)} questions for {material.key}")
        return questions


def build_question_source(ai_settings: AISettings = settings.ai) -> QuestionSource:
    """Gemini-backed source when an API key is configured, static otherwise."""
    if ai_settings.enabled:
        return GeminiQuestionSource(ai_settings)
    logger.warning("Gemini API key is not configured, using static questions")
    return StaticQuestionSource()
