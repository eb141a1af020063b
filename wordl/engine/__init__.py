from .feedback import (WORD_LENGTH, Hit, Miss, Contains, GuessRecord,
                       record_from_pattern, record_from_marks)
from .constraints import Constraints, aggregate
from .validity import make_is_valid, filter_candidates
from .dictionary import DictionaryStore
from .scoring import score, score_record
from .validation import validate_guess, check_consistency

__all__ = [
    "WORD_LENGTH", "Hit", "Miss", "Contains", "GuessRecord",
    "record_from_pattern", "record_from_marks", "Constraints", "aggregate",
    "make_is_valid", "filter_candidates", "DictionaryStore", "score", "score_record",
    "validate_guess", "check_consistency",
]
