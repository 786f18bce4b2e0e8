from __future__ import annotations

from datetime import timedelta

from millionaire.core.config import get_settings

GAME_TIME_LIMIT = timedelta(minutes=max(1, int(get_settings().game_time_limit_minutes)))
FRIEND_CALL_ACCURACY = min(1.0, max(0.0, float(get_settings().friend_call_accuracy)))
SESSION_HISTORY_LIMIT = 50
