from millionaire.db.models.game_questions import GameQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.db.models.ledger_entries import LedgerEntry
from millionaire.db.models.questions import Question
from millionaire.db.models.users import User

__all__ = [
    "GameQuestion",
    "GameSession",
    "LedgerEntry",
    "Question",
    "User",
]
