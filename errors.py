from enum import Enum
from typing import NoReturn


class ErrorType(Enum):
    TYPE_ERROR = 1


class ListError(Exception):
    """Raised when a list operation is handed a value of the wrong type.
    Failures coming out of caller supplied callbacks are never turned into
    a ListError, they reach the caller as they were raised.
    """

    def __init__(self, error_type: ErrorType, description: str = ''):
        self.error_type = error_type
        self.description = description
        message = error_type.name
        if description:
            message = f'{message}: {description}'
        super().__init__(message)


def error(error_type: ErrorType, description: str = '') -> NoReturn:
    raise ListError(error_type, description)
