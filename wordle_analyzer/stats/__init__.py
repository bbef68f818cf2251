from .tracker import StatsTracker, format_summary, LOSS_PENALTY

__all__ = ["StatsTracker", "format_summary", "LOSS_PENALTY"]
