"""
Win/loss statistics across finished games.

A front-end records one event per finished session and asks for a summary
on demand. Stored as a small JSON document:
    {"wins": [3, 4, 4, 6], "losses": 1}
where `wins` lists the turn each won game ended on.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import numpy as np

from wordle_analyzer.game.session import WORDLE_MAX_TURNS

# Turns charged to a lost game when averaging
LOSS_PENALTY = WORDLE_MAX_TURNS + 1


class StatsTracker:
    def __init__(self, wins: List[int] | None = None, losses: int = 0):
        self.wins: List[int] = list(wins or [])
        self.losses = int(losses)

    def record(self, won: bool, turns: int | None = None) -> None:
        """Add one finished game; `turns` is the winning turn (1..6)."""
        if not won:
            self.losses += 1
            return
        if turns is None or not 1 <= turns <= WORDLE_MAX_TURNS:
            raise ValueError(f"winning turn must be 1..{WORDLE_MAX_TURNS}; got {turns}")
        self.wins.append(int(turns))

    def record_session(self, session) -> None:
        """
        Record a finished game.Session. A game played past the Wordle turn
        limit (max_turns > 6) counts as a loss even when it was solved.
        """
        if not session.is_over:
            raise ValueError("session is still active")
        won = session.won_on is not None and session.won_on <= WORDLE_MAX_TURNS
        self.record(won, session.won_on if won else None)

    @property
    def played(self) -> int:
        return len(self.wins) + self.losses

    def summary(self) -> Dict:
        turns = np.array(self.wins + [LOSS_PENALTY] * self.losses, dtype=float)
        counts = np.bincount(np.array(self.wins, dtype=int), minlength=WORDLE_MAX_TURNS + 1)
        played = self.played
        return {
            "played": played,
            "wins": len(self.wins),
            "losses": self.losses,
            "win_rate": 100.0 * len(self.wins) / played if played else 0.0,
            "distribution": {t: int(counts[t]) for t in range(1, WORDLE_MAX_TURNS + 1)},
            "average_turns": float(turns.mean()) if played else 0.0,
        }

    # ---- persistence ----

    @classmethod
    def load(cls, path: Path | str) -> "StatsTracker":
        """Read stats from `path`; a missing file means no games yet."""
        p = Path(path)
        if not p.exists():
            return cls()
        data = json.loads(p.read_text(encoding="utf-8"))
        return cls(wins=data.get("wins", []), losses=data.get("losses", 0))

    def save(self, path: Path | str) -> str:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps({"wins": self.wins, "losses": self.losses}) + "\n",
                     encoding="utf-8")
        return str(p)


def format_summary(summary: Dict) -> str:
    lines = [
        f"Played: {summary['played']}",
        f"Win %: {summary['win_rate']:.0f}",
        f"Average turns (loss = {LOSS_PENALTY}): {summary['average_turns']:.2f}",
        "Guess distribution:",
    ]
    most = max(summary["distribution"].values()) or 1
    for t, n in summary["distribution"].items():
        lines.append(f"  {t} | {'#' * round(20 * n / most)} {n}")
    return "\n".join(lines)
