"""Error taxonomy shared by the engine, the rules pipeline and the host service."""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    FORBIDDEN = "FORBIDDEN"
    FINISHED = "FINISHED"


class GameError(Exception):
    """Raised by factories and parsers that cannot return a result object.

    Engine operations report failures through ValidationResult/ProcessResult instead.
    """

    def __init__(self, code: ErrorKind, message: str = ""):
        super().__init__(f"{code.value}: {message}" if message else code.value)
        self.code = code
        self.message = message
