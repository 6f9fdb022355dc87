import argparse
import logging
import sys

from riskwar.war.game_master import GameMaster
from riskwar.war.state import Outcome


class WarGameState:
    """Win and streak tallies for a simulation, kept per seat (1 and 2)."""

    SEATS = (1, 2)

    def __init__(self):
        self.rounds_played = 0
        self.wars_fought = 0
        self.wins = {seat: 0 for seat in self.SEATS}
        self.current_streak = {seat: 0 for seat in self.SEATS}
        self.max_streak = {seat: 0 for seat in self.SEATS}

    def record_win(self, winner):
        self.rounds_played += 1
        self.wins[winner] += 1
        for seat in self.SEATS:
            if seat == winner:
                self.current_streak[seat] += 1
                self.max_streak[seat] = max(
                    self.max_streak[seat], self.current_streak[seat]
                )
            else:
                self.current_streak[seat] = 0

    def get_state(self):
        return {
            "rounds_played": self.rounds_played,
            "wars_fought": self.wars_fought,
            "wins": self.wins,
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
        }

    def display_stats(self, game):
        print(f"Rounds Played: {self.rounds_played}")
        print(f"Wars Fought: {self.wars_fought}")
        for seat, player in zip(self.SEATS, (game.player_one, game.player_two)):
            wins = self.wins[seat]
            win_percentage = (wins / self.rounds_played) * 100 if self.rounds_played else 0
            print(f"{player.name} (seat {seat}) won {wins} times ({win_percentage:.2f}%).")
            print(f"{player.name}'s longest win streak: {self.max_streak[seat]}")
            print(f"{player.name} finished with {player.cash}")


def play_round(game, game_state, bet, risk):
    """
    Play one betting round through to a winner.

    Returns False when a player can no longer cover the bet.
    """
    betting = game.place_bets(bet, bet)
    if betting.outcome is not Outcome.BET_SUCCESS:
        return False

    result = game.run_standoff()
    while result.outcome is Outcome.TIE:
        game_state.wars_fought += 1
        result = game.run_war(risk, risk)

    if result.outcome is Outcome.PLAYER_1_WIN:
        game_state.record_win(1)
    else:
        game_state.record_win(2)
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play a simulation of War with betting and risk."
    )
    parser.add_argument(
        "-r",
        "--rounds",
        type=int,
        default=1000,
        help="number of rounds to play (default: 1000)",
    )
    parser.add_argument(
        "-n",
        "--names",
        nargs="+",
        default=["Alice", "Bob"],
        help="one or two player names; one name plays a CPU (default: Alice Bob)",
    )
    parser.add_argument(
        "-b", "--bet", type=int, default=10, help="bet per player per round (default: 10)"
    )
    parser.add_argument(
        "-c", "--cash", type=int, default=1000, help="starting cash (default: 1000)"
    )
    parser.add_argument(
        "--risk", action="store_true", help="both players take the risk in every war"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if len(args.names) > 2:
        parser.error("War is played by one or two named players")
    return args


def run(argv=None):
    """Run a simulation from command-line arguments and return its tallies."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    game = GameMaster({"starting_cash": args.cash, "seed": args.seed})
    game.register(*args.names)
    game_state = WarGameState()

    for _ in range(args.rounds):
        if not play_round(game, game_state, args.bet, args.risk):
            print("A player can no longer cover the bet.")
            break

    game_state.display_stats(game)
    return game_state


def main(argv=None):
    run(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
