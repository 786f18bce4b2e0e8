from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class HintType(str, Enum):
    AUDIENCE_HELP = "audience_help"
    FIFTY_FIFTY = "fifty_fifty"
    FRIEND_CALL = "friend_call"


@dataclass(frozen=True, slots=True)
class HintState:
    audience_help: dict[str, int] | None = None
    fifty_fifty: tuple[str, str] | None = None
    friend_call: str | None = None

    def is_empty(self) -> bool:
        return self.audience_help is None and self.fifty_fifty is None and self.friend_call is None

    def with_audience_help(self, votes: dict[str, int]) -> HintState:
        return replace(self, audience_help=dict(votes))

    def with_fifty_fifty(self, keys: tuple[str, str]) -> HintState:
        return replace(self, fifty_fifty=keys)

    def with_friend_call(self, text: str) -> HintState:
        return replace(self, friend_call=text)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.audience_help is not None:
            payload[HintType.AUDIENCE_HELP.value] = dict(self.audience_help)
        if self.fifty_fifty is not None:
            payload[HintType.FIFTY_FIFTY.value] = list(self.fifty_fifty)
        if self.friend_call is not None:
            payload[HintType.FRIEND_CALL.value] = self.friend_call
        return payload

    @classmethod
    def from_payload(cls, payload: dict[str, object] | None) -> HintState:
        if not payload:
            return cls()
        audience = payload.get(HintType.AUDIENCE_HELP.value)
        fifty = payload.get(HintType.FIFTY_FIFTY.value)
        friend = payload.get(HintType.FRIEND_CALL.value)
        return cls(
            audience_help=(
                {str(key): int(value) for key, value in audience.items()}
                if isinstance(audience, dict)
                else None
            ),
            fifty_fifty=(tuple(str(key) for key in fifty) if isinstance(fifty, list | tuple) else None),
            friend_call=(str(friend) if friend is not None else None),
        )
