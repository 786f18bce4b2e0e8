class QuestionError(Exception):
    pass


class QuestionValidationError(QuestionError):
    pass


class GameQuestionValidationError(QuestionError):
    pass
