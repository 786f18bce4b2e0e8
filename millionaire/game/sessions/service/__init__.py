from __future__ import annotations

from .constants import FRIEND_CALL_ACCURACY, GAME_TIME_LIMIT, SESSION_HISTORY_LIMIT
from .sessions_answer import answer_current_question
from .sessions_create import create_session_for_player
from .sessions_hints import use_hint
from .sessions_queries import (
    get_active_session_for_player,
    get_session_for_player,
    list_sessions_for_player,
)
from .sessions_take_money import take_money


class GameSessionService:
    create_session_for_player = staticmethod(create_session_for_player)
    answer_current_question = staticmethod(answer_current_question)
    take_money = staticmethod(take_money)
    use_hint = staticmethod(use_hint)
    get_session_for_player = staticmethod(get_session_for_player)
    get_active_session_for_player = staticmethod(get_active_session_for_player)
    list_sessions_for_player = staticmethod(list_sessions_for_player)


__all__ = [
    "FRIEND_CALL_ACCURACY",
    "GAME_TIME_LIMIT",
    "SESSION_HISTORY_LIMIT",
    "GameSessionService",
]
