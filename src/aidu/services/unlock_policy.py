"""Unlock rules for the problem sets of a unit.

Every learning area is a completion chain: a set is accessible once its
predecessor appears in the matching ``completed_sets`` list.

    vocabulary: flashcard -> vocab-set-a -> vocab-set-b
    grammar:    <grammar id>-set-a -> <grammar id>-set-b   (per grammar point)
    reading:    reading-set-a -> reading-set-b

Scores never gate access. All functions here are pure.
"""
from typing import List, Optional

from aidu.models.content_models import LearningArea
from aidu.models.progress_models import UnitProgress
from aidu.models.quiz_models import SetStatus

FLASHCARD_SET = "flashcard"
VOCAB_CHAIN = [FLASHCARD_SET, "vocab-set-a", "vocab-set-b"]
READING_CHAIN = ["reading-set-a", "reading-set-b"]
GRAMMAR_SUFFIXES = ["-set-a", "-set-b"]


def grammar_chain(grammar_id: str) -> List[str]:
    return [f"{grammar_id}{suffix}" for suffix in GRAMMAR_SUFFIXES]


def area_of(set_id: str) -> Optional[LearningArea]:
    """Learning area a set id belongs to, or None for unknown ids."""
    if set_id in VOCAB_CHAIN:
        return LearningArea.VOCABULARY
    if set_id in READING_CHAIN:
        return LearningArea.READING
    if grammar_id_of(set_id):
        return LearningArea.GRAMMAR
    return None


def grammar_id_of(set_id: str) -> Optional[str]:
    """Grammar point id of a grammar set ("m1-l1-g1-set-b" -> "m1-l1-g1")."""
    if set_id in VOCAB_CHAIN or set_id in READING_CHAIN:
        return None
    for suffix in GRAMMAR_SUFFIXES:
        if set_id.endswith(suffix) and len(set_id) > len(suffix):
            return set_id[: -len(suffix)]
    return None


def predecessor_of(set_id: str) -> Optional[str]:
    """The set that must be completed before ``set_id``; None for chain heads."""
    for chain in (VOCAB_CHAIN, READING_CHAIN):
        if set_id in chain:
            index = chain.index(set_id)
            return chain[index - 1] if index > 0 else None
    grammar_id = grammar_id_of(set_id)
    if grammar_id:
        chain = grammar_chain(grammar_id)
        index = chain.index(set_id)
        return chain[index - 1] if index > 0 else None
    return None


def _completed_sets(set_id: str, unit_progress: Optional[UnitProgress]) -> List[str]:
    if unit_progress is None:
        return []
    area = area_of(set_id)
    if area == LearningArea.VOCABULARY:
        return unit_progress.vocabulary.completed_sets
    if area == LearningArea.READING:
        return unit_progress.reading.completed_sets
    if area == LearningArea.GRAMMAR:
        # Read without materializing the grammar entry
        grammar = unit_progress.grammar.get(grammar_id_of(set_id))
        return grammar.completed_sets if grammar else []
    return []


def is_unlocked(set_id: str, unit_progress: Optional[UnitProgress]) -> bool:
    """Whether a set is accessible given the unit's progress."""
    if area_of(set_id) is None:
        return False
    predecessor = predecessor_of(set_id)
    if predecessor is None:
        return True
    return predecessor in _completed_sets(set_id, unit_progress)


def is_completed(set_id: str, unit_progress: Optional[UnitProgress]) -> bool:
    return set_id in _completed_sets(set_id, unit_progress)


def set_status(set_id: str, unit_progress: Optional[UnitProgress]) -> SetStatus:
    if is_completed(set_id, unit_progress):
        return SetStatus.COMPLETED
    if is_unlocked(set_id, unit_progress):
        return SetStatus.AVAILABLE
    return SetStatus.LOCKED
