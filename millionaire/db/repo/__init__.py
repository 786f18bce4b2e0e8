from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.db.repo.ledger_repo import LedgerRepo
from millionaire.db.repo.questions_repo import QuestionsRepo
from millionaire.db.repo.users_repo import UsersRepo

__all__ = [
    "GameSessionsRepo",
    "LedgerRepo",
    "QuestionsRepo",
    "UsersRepo",
]
