#!/usr/bin/env python3
"""
Example demonstrating the DuelEngine in a terminal.

Type "d" to draw a card, "h" to hold and "q" to quit. A finished round is
replaced by a new one on the next input. With --auto the human side stands on
a fixed score and the demo plays itself.
"""

import argparse

from blackjack_duel.common.logging_utils import setup_logging
from blackjack_duel.common.rng import seed_rng
from blackjack_duel.engine import DuelEngine
from blackjack_duel.events import EventBus, EngineEventType


def show(engine):
    view = engine.render_state()
    print(f"  You:      {', '.join(view['human_hand']) or '-'} ({view['human_score']})")
    print(
        f"  Computer: {', '.join(view['computer_hand']) or '-'} "
        f"({view['computer_score']})"
    )


def main():
    parser = argparse.ArgumentParser(description="Play the Blackjack duel.")
    parser.add_argument(
        "-r",
        "--rounds",
        type=int,
        default=3,
        help="number of rounds to play in auto mode (default: 3)",
    )
    parser.add_argument(
        "-a", "--auto", action="store_true", help="let the demo play the human side"
    )
    parser.add_argument(
        "--stand-on",
        type=int,
        default=17,
        help="score the auto player holds at (default: 17)",
    )
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every card dealt"
    )
    args = parser.parse_args()

    setup_logging("DEBUG" if args.verbose else "WARNING")
    if args.seed is not None:
        seed_rng(args.seed)

    event_bus = EventBus.get_instance()

    def on_forced_hold(data):
        print(
            f"Target reached ({data['human_score']} vs {data['computer_score']}), "
            "everybody holds"
        )

    def on_round_ended(data):
        print(f"Round {data['round_number']} over. Winner: {data['winner']}")

    event_bus.on(EngineEventType.FORCED_HOLD, on_forced_hold)
    event_bus.on(EngineEventType.ROUND_ENDED, on_round_ended)

    engine = DuelEngine()
    finished = 0

    while True:
        if args.auto:
            if finished >= args.rounds:
                break
            wants_to_draw = engine.human_score < args.stand_on
        else:
            choice = input("[d]raw, [h]old or [q]uit? ").strip().lower()
            if choice.startswith("q"):
                break
            wants_to_draw = choice.startswith("d")

        was_over = engine.is_round_over
        engine.handle_input(wants_to_draw)
        engine.settle()
        show(engine)

        if engine.is_round_over and not was_over:
            finished += 1

    print(f"\nRounds finished: {finished}")


if __name__ == "__main__":
    main()
