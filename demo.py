#!/usr/bin/env python3
"""Watch random reveals play out on a Minesweeper grid."""
import random
import time
import os

from minegrid import GameConfig, GameEngine, render_ansi


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(config: GameConfig, delay: float = 0.3, games: int = 5):
    """Run demo games with visualization."""
    size = config.size
    print(f"Grid: {size}x{size} with {config.mines_to_place} mines "
          f"({100*config.mines_to_place/config.total_cells:.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    rng = random.Random(config.seed)
    wins = 0

    for game in range(games):
        engine = GameEngine(config, rng=random.Random(rng.getrandbits(32)))

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(render_ansi(engine))
        time.sleep(delay)

        step = 0

        while engine.is_playing:
            row, col = rng.choice(engine.get_valid_actions())
            engine.reveal(row, col)
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(render_ansi(engine, reveal_mines=not engine.is_playing))

            if engine.is_won:
                wins += 1
                print(f"\n*** WIN! ***")
            elif engine.is_over:
                print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Grid size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (overrides --density)")
    parser.add_argument("--density", type=float, default=0.2, help="Fraction of cells holding mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    if args.mines is not None:
        config = GameConfig(size=args.size, num_mines=args.mines, seed=args.seed)
    else:
        config = GameConfig.from_density(args.size, args.density, seed=args.seed)

    demo(config, delay=args.delay, games=args.games)
