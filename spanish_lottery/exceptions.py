"""Error types raised by the generator core and its collaborators."""


class LotteryError(Exception):
    """Base class for all application errors."""


class InvalidInputError(LotteryError, ValueError):
    """A precondition on the input numbers or config was violated."""


class DataUnavailableError(LotteryError):
    """Historical results could not be fetched or parsed."""

    def __init__(self, game_id: str, reason: str):
        self.game_id = game_id
        self.reason = reason
        super().__init__(f"[{game_id}] historical data unavailable: {reason}")
