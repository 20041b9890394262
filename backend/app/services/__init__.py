"""Match services: the rating rule and the event-driven stat updater."""

from .rating import recalc_rating
from .stats import InvalidAssistReference, StatUpdater, get_stat_updater

__all__ = [
    "recalc_rating",
    "InvalidAssistReference",
    "StatUpdater",
    "get_stat_updater",
]
