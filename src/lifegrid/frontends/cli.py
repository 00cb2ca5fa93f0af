"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import math
import sys
import time
from typing import List, Optional

from ..core.config import DEFAULT_CONFIG, GridConfig
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..formats import PatternError, parse_life
from ..formats.render import ENCODERS
from .terminal import clear_sequence


class CLIGameOfLife:
    """Command-line interface for running a pattern file forward."""

    def __init__(self, config: GridConfig = DEFAULT_CONFIG) -> None:
        """Initialize CLI interface.

        Args:
            config: Grid dimensions used for every run
        """
        self.config = config

    def run_simulation(self, pattern_file: str, generations: int, verbose: bool = False) -> Grid:
        """Load a pattern file and simulate it.

        Args:
            pattern_file: Path to a Life 1.05, Life 1.06 or RLE file
            generations: Number of generations to run
            verbose: Print progress updates to stderr

        Returns:
            The final generation

        Raises:
            PatternError: If the pattern file cannot be read
        """
        if verbose:
            print(f"Loading {pattern_file} onto a {self.config.width}x{self.config.height} grid", file=sys.stderr)

        grid = parse_life(pattern_file, self.config)
        game = GameOfLife(grid)

        if verbose:
            print(f"Initial population: {game.population} cells", file=sys.stderr)
            print(f"Running {generations} generations...", file=sys.stderr)

        start_time = time.time()
        final_grid = game.run(generations)
        duration = time.time() - start_time

        if verbose:
            print(
                f"Final population: {game.population} cells after {game.generation} generations "
                f"({duration:.3f} seconds)",
                file=sys.stderr,
            )

        return final_grid

    def format_grid(self, grid: Grid, output_format: str = "text", clear: str = "") -> str:
        """Format the final grid for printing.

        Args:
            grid: Grid to format
            output_format: One of the keys of ``ENCODERS``
            clear: Terminal control sequence written before the grid

        Returns:
            Text ready for stdout
        """
        return clear + ENCODERS[output_format](grid)


def parse_generations(value: str) -> int:
    """Parse a generation count, truncating fractional values.

    Raises:
        argparse.ArgumentTypeError: If the value is not a finite, non-negative number
    """
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid generation count: '{value}'") from None

    if not math.isfinite(number) or number < 0:
        raise argparse.ArgumentTypeError(f"generation count must be a non-negative number, got '{value}'")

    return int(number)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run a Game of Life pattern file for a number of generations and print the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Supported pattern files:
  Life 1.05  first line '#Life 1.05', rows of '.' and '*'
  Life 1.06  first line '#Life 1.06', one 'x y' live cell per line
  RLE        optional '#' comments, 'x = W, y = H', then runs of b, o, $ and !

Examples:
  # Run a glider for 20 generations
  lifegrid glider.rle 20

  # Print the starting position unchanged
  lifegrid acorn.lif 0

  # Write the result back out as RLE
  lifegrid --output-format rle pulsar.rle 3
        """,
    )

    parser.add_argument("pattern_file", help="Life 1.05, Life 1.06 or RLE pattern file")

    parser.add_argument(
        "generations",
        type=parse_generations,
        help="Number of generations to simulate (fractions are truncated)",
    )

    parser.add_argument(
        "-f",
        "--output-format",
        choices=sorted(ENCODERS),
        default="text",
        help="Format of the final generation (default: text)",
    )

    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the terminal before printing the grid",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information to stderr",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    cli = CLIGameOfLife()

    try:
        grid = cli.run_simulation(args.pattern_file, args.generations, verbose=args.verbose)
    except PatternError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 1

    clear = clear_sequence(sys.stdout) if args.clear else ""
    sys.stdout.write(cli.format_grid(grid, args.output_format, clear))
    return 0


if __name__ == "__main__":
    sys.exit(main())
