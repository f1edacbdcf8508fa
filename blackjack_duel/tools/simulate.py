#!/usr/bin/env python
"""
Duel simulation tool.

Plays many rounds with a threshold policy for the human and prints the
outcome rates. Optionally checks the shuffle and the random-position draw
for positional bias.

Examples:
    # 10,000 rounds, human stands on 17, reproducible
    python -m blackjack_duel.tools.simulate --rounds 10000 --seed 42

    # A cautious human who stands on 14
    python -m blackjack_duel.tools.simulate --rounds 5000 --stand-on 14

    # Also test 2,000 shuffles and 2,000 dealt-out decks for uniformity
    python -m blackjack_duel.tools.simulate --check-shuffle 2000
"""

import argparse
import logging
import sys

from blackjack_duel.common.logging_utils import setup_logging
from blackjack_duel.common.rng import get_rng, seed_rng
from blackjack_duel.config import DuelRules
from blackjack_duel.verification.simulation import simulate_rounds, summarize_outcomes
from blackjack_duel.verification.statistics import (
    chi_square_uniformity,
    draw_order_frequencies,
    shuffle_position_frequencies,
)

logger = logging.getLogger("blackjack_duel.tools.simulate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate rounds of the Blackjack duel and report outcome rates"
    )
    parser.add_argument(
        "--rounds", type=int, default=1000, help="Number of rounds to play"
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible results")
    parser.add_argument(
        "--stand-on",
        type=int,
        default=17,
        help="The simulated human holds at or above this score",
    )
    parser.add_argument(
        "--computer-stand-above",
        type=int,
        default=17,
        help="The computer holds once above this score and ahead",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=0.95,
        help="Confidence level for the outcome rate intervals",
    )
    parser.add_argument(
        "--check-shuffle",
        type=int,
        default=0,
        metavar="TRIALS",
        help="Run chi-square uniformity checks over this many decks",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=0.01,
        help="Significance level for the uniformity checks",
    )
    parser.add_argument(
        "--log-level", help="Logging level (defaults to BLACKJACK_DUEL_LOG_LEVEL)"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    rng = seed_rng(args.seed) if args.seed is not None else get_rng()
    try:
        rules = DuelRules(computer_stand_above=args.computer_stand_above)
        results = simulate_rounds(
            args.rounds, stand_on=args.stand_on, rules=rules, rng=rng
        )
        summary = summarize_outcomes(results, confidence=args.confidence)
    except ValueError as e:
        logger.error("Invalid simulation parameters: %s", e)
        return 2

    print(f"Played {len(results)} rounds (human stands on {args.stand_on})")
    print(summary.to_string(float_format=lambda v: f"{v:.4f}"))
    print(
        f"Average scores: you {results['human_score'].mean():.2f}, "
        f"computer {results['computer_score'].mean():.2f}"
    )

    exit_code = 0
    if args.check_shuffle:
        checks = {
            "shuffle": shuffle_position_frequencies(args.check_shuffle, rng),
            "draw": draw_order_frequencies(args.check_shuffle, rng),
        }
        for name, counts in checks.items():
            result = chi_square_uniformity(counts)
            verdict = "PASS" if result.passes(args.alpha) else "FAIL"
            print(
                f"{name}: chi2={result.statistic:.1f} "
                f"dof={result.degrees_of_freedom} p={result.p_value:.4f} {verdict}"
            )
            if verdict == "FAIL":
                exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
