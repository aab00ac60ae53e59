"""Models for textbook curriculum content."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LearningArea(Enum):
    """The three learning areas of a unit."""
    VOCABULARY = "vocabulary"
    GRAMMAR = "grammar"
    READING = "reading"


class SchoolLevel(Enum):
    MIDDLE = "middle"
    HIGH = "high"


@dataclass
class Grade:
    """A school grade such as "middle-1"."""
    id: str
    name: str
    short_name: str
    level: SchoolLevel
    order: int
    total_units: int
    is_mock: bool = False


@dataclass
class Word:
    """A core vocabulary word of a unit."""
    id: str
    english: str
    korean: str
    example_sentence: str
    example_translation: str
    difficulty: str = "basic"
    part_of_speech: Optional[str] = None
    pronunciation: Optional[str] = None


@dataclass
class Phrase:
    id: str
    english: str
    korean: str
    example_sentence: str
    example_translation: str


@dataclass
class GrammarExample:
    sentence: str
    translation: str
    highlight: Optional[str] = None


@dataclass
class GrammarSection:
    """One grammar point taught in a unit."""
    id: str
    grammar_point: str
    korean_name: str
    explanation: str
    examples: List[GrammarExample] = field(default_factory=list)


@dataclass
class ReadingSection:
    passage: str = ""
    title: Optional[str] = None
    word_count: int = 0
    estimated_minutes: int = 0


@dataclass
class TextbookUnit:
    """One lesson of a grade with vocabulary, grammar and reading content."""
    id: str
    grade_id: str
    order: int
    title: str
    topic: str
    is_mock: bool = False
    words: List[Word] = field(default_factory=list)
    phrases: List[Phrase] = field(default_factory=list)
    grammar: List[GrammarSection] = field(default_factory=list)
    reading: ReadingSection = field(default_factory=ReadingSection)

    def get_grammar(self, grammar_id: str) -> Optional[GrammarSection]:
        return next((g for g in self.grammar if g.id == grammar_id), None)


@dataclass
class SetDefinition:
    """A completable problem set shown for a unit."""
    id: str
    name: str
    area: LearningArea
    description: str
    problem_count: int = 0
    grammar_id: Optional[str] = None
