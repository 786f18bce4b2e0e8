class GameSessionError(Exception):
    pass


class PlayerNotFoundError(GameSessionError):
    pass


class SessionNotFoundError(GameSessionError):
    pass


class InvalidAnswerLetterError(GameSessionError):
    pass


class InvalidHintTypeError(GameSessionError):
    pass


class NothingToBankError(GameSessionError):
    pass


class HintAlreadyUsedError(GameSessionError):
    pass


class InsufficientQuestionsError(GameSessionError):
    def __init__(self, level: int) -> None:
        super().__init__(f"question bank has no item for level {level}")
        self.level = level
