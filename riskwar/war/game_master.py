"""
The game master for War with betting and risk.

The game master owns the two players, the pot and the card supply for one game,
and is the only code that moves cash between them. A presentation layer
collects input from the players, calls the phase operation for that input and
renders the result it gets back:

    game = GameMaster({"starting_cash": 500, "seed": 7})
    game.register("Alice")
    game.place_bets(10, 10)
    result = game.run_standoff()
    while result.outcome is Outcome.TIE:
        result = game.run_war(risk1=True, risk2=False)

Over-large bets come back as outcomes, not exceptions. Exceptions are reserved
for calls made out of order.
"""

import logging
import random
from typing import Any, Dict, Optional

from riskwar.common.actor import CpuPlayer, Player
from riskwar.common.card import Card
from riskwar.common.pot import Pot
from riskwar.common.supply import CardSupply
from riskwar.events import EngineEventType, EventEmitter
from riskwar.war.constants import BURN_COUNT, CPU_NAMES, DEFAULT_CONFIG
from riskwar.war.state import (
    BettingPhaseResult,
    Outcome,
    StandoffPhaseResult,
    WarPhaseResult,
)
from riskwar.war.transitions import compare_cards, resolve_risk

logger = logging.getLogger(__name__)


class PhaseOrderError(RuntimeError):
    """Raised when a phase is run before registration or out of sequence."""

    pass


class InvalidBetError(ValueError):
    """Raised when a bet is negative or not a whole number."""

    pass


class GameMaster:
    """
    Phase orchestrator for a single game.

    Args:
        config: Options merged over DEFAULT_CONFIG (starting_cash, seed)
        supply: Card supply to deal from (a fresh shuffled one if omitted)
        emitter: Event emitter for phase events (a private one if omitted)
        rng: Random generator for shuffling and CPU naming; overrides config["seed"]
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        supply: Optional[CardSupply] = None,
        emitter: Optional[EventEmitter] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)

        self.rng = rng or random.Random(self.config["seed"])
        self.emitter = emitter or EventEmitter()
        self.supply = supply or CardSupply(rng=self.rng, emitter=self.emitter)
        self.pot = Pot()
        self.player_one: Optional[Player] = None
        self.player_two: Optional[Player] = None
        self._awaiting_war = False

    @property
    def player_two_name(self) -> str:
        """Player two's name, which may have been generated for a CPU opponent."""
        self._require_players()
        return self.player_two.name

    @property
    def awaiting_war(self) -> bool:
        """True while a tie is unresolved and the next phase must be a war."""
        return self._awaiting_war

    def register(self, p1_name: str, p2_name: Optional[str] = None) -> None:
        """
        Seat the players and start a fresh game.

        With a single name the second seat goes to a CPU opponent with a
        generated name.

        Args:
            p1_name: The first player's name
            p2_name: The second player's name, or None for a CPU opponent
        """
        cash = self.config["starting_cash"]
        self.player_one = Player(p1_name, cash)
        if p2_name is None:
            self.player_two = CpuPlayer(CPU_NAMES, self.rng, cash, taken=(p1_name,))
        else:
            self.player_two = Player(p2_name, cash)
        self.pot.clear()
        self._awaiting_war = False

        self.emitter.emit(EngineEventType.GAME_CREATED, {"starting_cash": cash})
        for seat, player in enumerate((self.player_one, self.player_two), start=1):
            self.emitter.emit(
                EngineEventType.PLAYER_JOINED,
                {
                    "seat": seat,
                    "player_name": player.name,
                    "cpu": isinstance(player, CpuPlayer),
                },
            )
        logger.debug(
            "Registered %s and %s with %d each",
            self.player_one.name,
            self.player_two.name,
            cash,
        )

    def place_bets(self, bet1: int, bet2: int) -> BettingPhaseResult:
        """
        Run the betting phase.

        Player one's bet is checked first; if it fails, player two's bet is
        not looked at. Nothing changes unless both bets are covered, in which
        case both are moved into the pot.

        Args:
            bet1: Player one's bet
            bet2: Player two's bet

        Returns:
            The betting phase result
        """
        self._require_players()
        for bet in (bet1, bet2):
            if isinstance(bet, bool) or not isinstance(bet, int) or bet < 0:
                raise InvalidBetError(f"Bets must be non-negative integers: {bet!r}")

        if bet1 > self.player_one.cash:
            return self._reject_bet(Outcome.PLAYER_1_BET_FAIL, self.player_one, bet1)
        if bet2 > self.player_two.cash:
            return self._reject_bet(Outcome.PLAYER_2_BET_FAIL, self.player_two, bet2)

        self.player_one.subtract_cash(bet1)
        self.player_two.subtract_cash(bet2)
        self.pot.add_cash(bet1 + bet2)

        self.emitter.emit(
            EngineEventType.MONEY_BET,
            {"bets": [bet1, bet2], "pot_value": self.pot.value},
        )
        logger.debug("Bets %d and %d placed, pot is %d", bet1, bet2, self.pot.value)
        return BettingPhaseResult(
            Outcome.BET_SUCCESS,
            self.pot.value,
            self.player_one.cash,
            self.player_two.cash,
        )

    def run_standoff(self) -> StandoffPhaseResult:
        """
        Run the standoff phase.

        Each player is dealt one card. The higher rank takes the pot; on equal
        ranks the pot is held and the next phase must be a war.

        Returns:
            The standoff phase result, carrying the pot before it was cleared
        """
        self._require_players()
        if self._awaiting_war:
            raise PhaseOrderError("A war is pending; run_war must be called next.")

        self._deal_to_players()
        outcome = compare_cards(self.player_one.card, self.player_two.card)
        pot_value = self.pot.value
        self._settle(outcome, pot_value, phase="standoff")

        return StandoffPhaseResult(
            outcome,
            pot_value,
            self.player_one.cash,
            self.player_two.cash,
            self.player_one.card,
            self.player_two.card,
        )

    def run_war(self, risk1: bool, risk2: bool) -> WarPhaseResult:
        """
        Run a war phase after a tie.

        Three cards are burned, a dealer card is dealt if either player asked
        for a risk, then each player is dealt a new card. Only the winner's
        risk flag counts: the risk is resolved against the dealer's card and
        the pot is halved or doubled before it is paid out. Another tie holds
        the pot for the next war.

        Args:
            risk1: Whether player one takes the risk if they win
            risk2: Whether player two takes the risk if they win

        Returns:
            The war phase result, carrying the amount paid out on a win
        """
        self._require_players()
        if not self._awaiting_war:
            raise PhaseOrderError("run_war requires a preceding tie.")

        burned = [self.deal_card() for _ in range(BURN_COUNT)]
        self.emitter.emit(
            EngineEventType.CARDS_BURNED, {"cards": [str(card) for card in burned]}
        )

        dealer_card: Optional[Card] = None
        if risk1 or risk2:
            dealer_card = self.deal_card()
            self.emitter.emit(
                EngineEventType.CARD_DEALT, {"seat": "dealer", "card": str(dealer_card)}
            )

        self._deal_to_players()
        outcome = compare_cards(self.player_one.card, self.player_two.card)

        risk_outcome: Optional[Outcome] = None
        winner = self._winner(outcome)
        took_risk = risk1 if outcome is Outcome.PLAYER_1_WIN else risk2
        if winner is not None and took_risk:
            risk_outcome = resolve_risk(winner.card, dealer_card)
            if risk_outcome is Outcome.RISK_LOSE:
                self.pot.halve()
            elif risk_outcome is Outcome.RISK_WIN:
                self.pot.double()
            self.emitter.emit(
                EngineEventType.RISK_RESOLVED,
                {
                    "player_name": winner.name,
                    "risk_outcome": risk_outcome.name,
                    "dealer_card": str(dealer_card),
                    "pot_value": self.pot.value,
                },
            )
            logger.debug(
                "%s risked against %s: %s", winner.name, dealer_card, risk_outcome.name
            )

        pot_value = self.pot.value
        self._settle(outcome, pot_value, phase="war")

        return WarPhaseResult(
            outcome,
            pot_value,
            self.player_one.cash,
            self.player_two.cash,
            self.player_one.card,
            self.player_two.card,
            risk_outcome,
            dealer_card,
        )

    def deal_card(self) -> Card:
        """
        Deal the next card from the supply, reshuffling a full deck if it ran out.

        Returns:
            The next card
        """
        return self.supply.deal()

    def _require_players(self):
        if self.player_one is None or self.player_two is None:
            raise PhaseOrderError("No players registered; call register first.")

    def _reject_bet(self, outcome: Outcome, player: Player, bet: int):
        self.emitter.emit(
            EngineEventType.BET_REJECTED,
            {"player_name": player.name, "bet": bet, "cash": player.cash},
        )
        logger.info("%s cannot cover a bet of %d (has %d)", player.name, bet, player.cash)
        return BettingPhaseResult(
            outcome, 0, self.player_one.cash, self.player_two.cash
        )

    def _deal_to_players(self):
        for seat, player in enumerate((self.player_one, self.player_two), start=1):
            card = self.deal_card()
            player.set_card(card)
            self.emitter.emit(
                EngineEventType.CARD_DEALT,
                {"seat": seat, "player_name": player.name, "card": str(card)},
            )
        logger.debug(
            "Dealt %s to %s and %s to %s",
            self.player_one.card,
            self.player_one.name,
            self.player_two.card,
            self.player_two.name,
        )

    def _winner(self, outcome: Outcome) -> Optional[Player]:
        if outcome is Outcome.PLAYER_1_WIN:
            return self.player_one
        if outcome is Outcome.PLAYER_2_WIN:
            return self.player_two
        return None

    def _settle(self, outcome: Outcome, pot_value: int, phase: str):
        """Pay the pot to the winner, or hold it for a war on a tie."""
        winner = self._winner(outcome)
        if winner is None:
            self._awaiting_war = True
            self.emitter.emit(
                EngineEventType.WAR_STARTED, {"phase": phase, "pot_value": pot_value}
            )
            logger.debug("Tie in %s, holding pot of %d for war", phase, pot_value)
            return

        winner.add_cash(pot_value)
        self.pot.clear()
        self._awaiting_war = False
        self.emitter.emit(
            EngineEventType.MONEY_PAYOUT,
            {"player_name": winner.name, "amount": pot_value},
        )
        self.emitter.emit(
            EngineEventType.ROUND_ENDED,
            {"phase": phase, "outcome": outcome.name, "winner_name": winner.name},
        )
        logger.debug("%s wins the %s and takes %d", winner.name, phase, pot_value)
