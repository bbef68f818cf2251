from .errors import (SessionError, InvalidGuess, InconsistentFeedback, GameOver,
                     SolverNonconvergence)
from .hints import Hint, GuessStats, OpeningReport, opening_report, starter_scores, format_hint
from .session import (Session, Status, TurnResult, SecretAnswer, ObservedFeedback,
                      new_game, cheat_game, WORDLE_MAX_TURNS)

__all__ = [
    "SessionError", "InvalidGuess", "InconsistentFeedback", "GameOver", "SolverNonconvergence",
    "Hint", "GuessStats", "OpeningReport", "opening_report", "starter_scores", "format_hint",
    "Session", "Status", "TurnResult", "SecretAnswer", "ObservedFeedback",
    "new_game", "cheat_game", "WORDLE_MAX_TURNS",
]
