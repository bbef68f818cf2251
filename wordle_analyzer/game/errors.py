"""Errors raised when a session rejects a submission."""


class SessionError(ValueError):
    """Base class: the submission was rejected and no turn was consumed."""


class InvalidGuess(SessionError):
    def __init__(self, guess):
        super().__init__(f"not a valid guess right now: {guess!r}")
        self.guess = guess


class InconsistentFeedback(SessionError):
    def __init__(self, guess: str, pattern: str):
        super().__init__(
            f"no possible answer matches this feedback ({guess} -> {pattern})")
        self.guess = guess
        self.pattern = pattern


class GameOver(SessionError):
    def __init__(self, status):
        super().__init__(f"game is already over ({status.value})")
        self.status = status


class SolverNonconvergence(RuntimeError):
    """A self-play game ran past the solver turn bound: corpus or algorithm defect."""

    def __init__(self, answer: str, turns: int, history):
        super().__init__(f"solver failed to find {answer!r} within {turns} turns")
        self.answer = answer
        self.turns = turns
        self.history = list(history)

    def __reduce__(self):
        # rebuilt from its fields when sent back from a worker process
        return self.__class__, (self.answer, self.turns, self.history)
