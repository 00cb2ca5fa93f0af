#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import io

from lifegrid import GameOfLife, parse_stream, render_grid
from lifegrid.formats.render import encode_rle

GLIDER_RLE = """#N Glider
x = 3, y = 3, rule = B3/S23
bob$2bo$3o!
"""


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Load a glider onto the middle of an 80x24 grid
    grid = parse_stream(io.StringIO(GLIDER_RLE))
    game = GameOfLife(grid)

    print("Initial state:")
    print(render_grid(game.grid), end="")
    print(f"Population: {game.population}")
    print()

    # Run simulation for 8 generations, four at a time
    for _ in range(2):
        game.run(4)
        print(f"Generation {game.generation}:")
        print(render_grid(game.grid), end="")
        print(f"Population: {game.population}")
        print()

    print("Final state as RLE:")
    print(encode_rle(game.grid), end="")


if __name__ == "__main__":
    main()
