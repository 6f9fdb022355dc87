#!/usr/bin/env python3
"""
Example demonstrating an interactive game of War with betting and risk.

This script plays the presentation layer: it asks the human for bets and risk
decisions, hands them to the GameMaster, and prints the phase results and the
events the game master publishes.
"""

import argparse
import random

from riskwar.events import EngineEventType
from riskwar.war import GameMaster, Outcome


def ask_int(prompt, default):
    answer = input(f"{prompt} [{default}]: ").strip()
    return int(answer) if answer else default


def main():
    parser = argparse.ArgumentParser(description="Play War against the computer.")
    parser.add_argument("-n", "--name", default="Player", help="your name")
    parser.add_argument(
        "-c", "--cash", type=int, default=100, help="starting cash (default: 100)"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args()

    game = GameMaster({"starting_cash": args.cash, "seed": args.seed})
    cpu_rng = random.Random(args.seed)

    game.emitter.on(
        EngineEventType.CARDS_BURNED,
        lambda data: print(f"Burned: {', '.join(data['cards'])}"),
    )
    game.emitter.on(
        EngineEventType.SHUFFLE, lambda data: print("The deck was reshuffled.")
    )

    game.register(args.name)
    cpu = game.player_two_name
    print(f"{args.name} vs {cpu}, {args.cash} each.")

    while game.player_one.cash > 0 and game.player_two.cash > 0:
        cpu_bet = cpu_rng.randint(0, game.player_two.cash)
        try:
            bet = ask_int("Your bet", min(10, game.player_one.cash))
            betting = game.place_bets(bet, cpu_bet)
        except ValueError as e:
            print(f"Invalid bet: {e}")
            continue
        if betting.outcome is not Outcome.BET_SUCCESS:
            print(f"Bet rejected: {betting.outcome.name}")
            continue
        print(f"{cpu} bets {cpu_bet}. The pot is {betting.pot_value}.")

        result = game.run_standoff()
        print(f"You drew {result.player_one_card}, {cpu} drew {result.player_two_card}.")
        while result.outcome is Outcome.TIE:
            print("WAR!")
            risk = input("Take the risk if you win? [y/N]: ").strip().lower() == "y"
            result = game.run_war(risk, cpu_rng.random() < 0.5)
            print(
                f"You drew {result.player_one_card}, {cpu} drew {result.player_two_card}."
            )
            if result.risk_outcome is not None:
                print(f"Dealer drew {result.dealer_card}: {result.risk_outcome.name}")

        winner = args.name if result.outcome is Outcome.PLAYER_1_WIN else cpu
        print(f"{winner} takes {result.pot_value}.")
        print(f"Cash: {args.name} {result.player_one_cash}, {cpu} {result.player_two_cash}")

    print("\nGame over!")


if __name__ == "__main__":
    main()
