"""Rules for legal plays."""

from typing import Optional

from fishinggame.engine.card import PENALTY_RANK, WILD_RANK, Card, Suit


def can_play(candidate: Card, top: Optional[Card], forced_color: Optional[Suit]) -> bool:
    """Check if ``candidate`` can be deposited on ``top``.

    ``top`` is None before the first deposit, when any card goes.
    """
    if top is None:
        return True

    # Wild is never allowed straight on a penalty card
    if candidate.rank == WILD_RANK and top.rank == PENALTY_RANK:
        return False

    if forced_color is not None:
        if candidate.rank == WILD_RANK:
            return True
        return candidate.suit == forced_color

    if candidate.rank == WILD_RANK:
        return True
    if candidate.suit == top.suit:
        return True
    if candidate.rank == top.rank:
        return True
    return False
