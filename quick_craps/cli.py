"""
Command line entry point.
"""
import argparse
import logging
import sys
from typing import Optional

from . import report
from .errors import CrapsError
from .press import PRESS_STRATEGIES
from .session import ROLLS_PER_HOUR, CrapsSession, SessionConfig
from .logging_utils import setup_logging
from .strategies import POLICIES

log = logging.getLogger("quick_craps")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quick-craps",
        description="Play thousands of craps turns and compare betting and press strategies.",
    )
    parser.add_argument("--players", type=int, default=6, help="players at the table")
    parser.add_argument("--hours", type=int, default=4, help="hours of play")
    parser.add_argument("--rolls-per-hour", type=int, default=ROLLS_PER_HOUR)
    parser.add_argument("--turns", type=int, default=None, help="total turns (overrides --hours)")
    parser.add_argument("--bet-unit", type=int, default=25)
    parser.add_argument("--table-limit", type=int, default=5000)
    parser.add_argument("--buyin", type=int, default=None, help="buy-in per player (default 40 units)")
    parser.add_argument("--seed", type=int, default=None, help="root seed for the dice")
    parser.add_argument("--streak", type=int, action="append", dest="streaks",
                        help="track longest run of this number (repeatable, default 7)")
    parser.add_argument("--policy", choices=sorted(POLICIES), default="pass-and-place")
    parser.add_argument("--press", choices=sorted(PRESS_STRATEGIES), default="none")
    parser.add_argument("--plot", default=None, help="write a roll-length chart to this file")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = SessionConfig(
            num_players=args.players,
            hours_of_play=args.hours,
            rolls_per_hour=args.rolls_per_hour,
            total_turns=args.turns,
            bet_unit=args.bet_unit,
            table_limit=args.table_limit,
            buyin=args.buyin,
            seed=args.seed,
            streak_numbers=tuple(args.streaks or (7,)),
        )
        policy = POLICIES[args.policy](config.rules, PRESS_STRATEGIES[args.press])
        session = CrapsSession(config, policy=policy)
        session.run()
    except (CrapsError, ValueError) as e:
        log.error("Run aborted: %s", e)
        return 1

    snapshot = session.stats()
    print(report.format_session(snapshot))
    if args.plot:
        path = report.plot_roll_lengths(snapshot, args.plot)
        log.info("Wrote roll-length chart → %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
