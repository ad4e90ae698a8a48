"""Error types raised by the game engine."""


class GameError(Exception):
    """Base exception for game-related errors."""

    code = "GAME_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class InvalidArgument(GameError, ValueError):
    """Malformed input to an operation. Always a caller bug."""

    code = "INVALID_ARGUMENT"


class OutOfRange(GameError, IndexError):
    """Index outside the current bounds of a hand or pile."""

    code = "OUT_OF_RANGE"


class InvalidState(GameError, RuntimeError):
    """Operation invoked while its preconditions do not hold."""

    code = "INVALID_STATE"


class Underflow(GameError, IndexError):
    """Draw attempted on an empty pile."""

    code = "UNDERFLOW"


class Unrecoverable(GameError):
    """Draw pile is empty and the discard pile has nothing left to recycle."""

    code = "UNRECOVERABLE"
