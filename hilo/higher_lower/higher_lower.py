import argparse
import asyncio
import logging
import random
import sys

from hilo.adapters import CLIAdapter
from hilo.common.io_interface import ConsoleIOInterface, LoggingIOInterface
from hilo.engine import HigherLowerEngine
from hilo.simulation import STRATEGIES, simulate


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play higher or lower against the dealer, or simulate many games."
    )
    parser.add_argument(
        "-s",
        "--simulate",
        type=int,
        metavar="GAMES",
        help="simulate GAMES automated games instead of playing",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="best-odds",
        help="strategy used when simulating (default: best-odds)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for reproducible shuffles"
    )
    parser.add_argument(
        "--transcript",
        metavar="FILE",
        help="append a transcript of the interactive game to FILE",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def run_simulation(args) -> None:
    strategy = STRATEGIES[args.strategy](random.Random(args.seed))
    result = simulate(args.simulate, strategy=strategy, seed=args.seed)
    summary = result.summary()

    print(f"Finished simulating {summary['games']} games with '{args.strategy}'.")
    print(f"Mean final chips: {summary['mean_final_chips']:.2f} (std {summary['std_final_chips']:.2f})")
    print(
        f"10th / 50th / 90th percentile: {summary['p10_final_chips']:.0f} / "
        f"{summary['median_final_chips']:.0f} / {summary['p90_final_chips']:.0f}"
    )
    print(f"Best finish: {summary['max_final_chips']} chips")
    print(f"Mean rounds per game: {summary['mean_rounds']:.1f}")
    print(f"Bust rate: {summary['bust_rate'] * 100:.1f}%")


async def play(args) -> None:
    io_interface = ConsoleIOInterface()
    if args.transcript:
        io_interface = LoggingIOInterface(args.transcript, inner=io_interface)

    adapter = CLIAdapter(io_interface)
    engine = HigherLowerEngine(adapter, {"seed": args.seed})
    await engine.initialize()
    try:
        while True:
            await engine.start_game()
            result = await engine.play_game()
            if not result["game_over"]:
                break
            if not await adapter.confirm("Play again? [y/N] "):
                break
    finally:
        await engine.shutdown()


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.simulate is not None:
        if args.simulate < 1:
            print("--simulate needs at least one game", file=sys.stderr)
            return 2
        run_simulation(args)
        return 0

    asyncio.run(play(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
