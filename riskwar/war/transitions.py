"""
Pure decision functions for the War phases.

Nothing here touches the players, the pot or the card supply. The game master
asks these functions what happened and then applies the effects itself, in
order.
"""

from riskwar.common.card import Card
from riskwar.war.state import Outcome


def compare_cards(player_one_card: Card, player_two_card: Card) -> Outcome:
    """
    Decide a standoff or war comparison.

    Args:
        player_one_card: Player one's card
        player_two_card: Player two's card

    Returns:
        PLAYER_1_WIN, PLAYER_2_WIN or TIE
    """
    order = player_one_card.compare(player_two_card)
    if order > 0:
        return Outcome.PLAYER_1_WIN
    if order < 0:
        return Outcome.PLAYER_2_WIN
    return Outcome.TIE


def resolve_risk(winner_card: Card, dealer_card: Card) -> Outcome:
    """
    Decide the risk a war winner took against the dealer's card.

    Args:
        winner_card: The winning player's card
        dealer_card: The dealer's card

    Returns:
        RISK_NEUTRAL if the winner's card is higher, RISK_LOSE if lower,
        RISK_WIN if both cards have the same rank
    """
    order = winner_card.compare(dealer_card)
    if order > 0:
        return Outcome.RISK_NEUTRAL
    if order < 0:
        return Outcome.RISK_LOSE
    return Outcome.RISK_WIN

