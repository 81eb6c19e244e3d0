from .candidates import CandidateEngine, EngineState, DEFAULT_WORD_LENGTH
from .constraints import filter_candidates
from .errors import WordleAssistError, DataSourceError, InvalidFeedbackError
from .feedback import Feedback, FeedbackRound, parse_round
from .index import PositionIndex
from .ranking import rank_guesses, TOP_K
from .scoring import WordScore, score_candidates
from .validation import validate_feedback

__all__ = [
    "CandidateEngine", "EngineState", "DEFAULT_WORD_LENGTH",
    "filter_candidates",
    "WordleAssistError", "DataSourceError", "InvalidFeedbackError",
    "Feedback", "FeedbackRound", "parse_round",
    "PositionIndex",
    "rank_guesses", "TOP_K",
    "WordScore", "score_candidates",
    "validate_feedback",
]
