BASE_RATING = 6.0
GOAL_WEIGHT = 1.0
ASSIST_WEIGHT = 0.5
MIN_RATING = 4.0
MAX_RATING = 10.0


def recalc_rating(goals: int, assists: int) -> float:
    """Return a player's form rating for the given goal and assist totals.

    The rating starts at ``BASE_RATING``, gains ``GOAL_WEIGHT`` per goal and
    ``ASSIST_WEIGHT`` per assist, and is clamped to
    ``[MIN_RATING, MAX_RATING]``.
    """

    raw = BASE_RATING + GOAL_WEIGHT * goals + ASSIST_WEIGHT * assists
    return max(MIN_RATING, min(MAX_RATING, raw))
