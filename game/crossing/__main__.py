"""
Command line entry point

    python -m game.crossing --play             # interactive window
    python -m game.crossing --episodes 5 --no-render
"""

import argparse

from .config import ENV_CONFIG
from .crossing_env import run_random_episode


def main(argv=None):
    parser = argparse.ArgumentParser(description="Road-crossing arcade game")
    parser.add_argument("--play", action="store_true",
                        help="Open a window and play with the arrow keys")
    parser.add_argument("--episodes", type=int, default=1,
                        help="Number of random-policy episodes to run")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-steps", type=int, default=ENV_CONFIG["max_steps"],
                        help="Step budget per episode")
    parser.add_argument("--no-render", action="store_true",
                        help="Run episodes without opening a window")
    parser.add_argument("--assets", type=str, default=".",
                        help="Directory holding the sounds/ folder")
    args = parser.parse_args(argv)

    if args.play:
        from .window import play
        session = play(seed=args.seed, asset_root=args.assets)
        print(f"Final score: {session.state.score} (level {session.state.level})")
        return

    results = []
    for ep in range(args.episodes):
        seed = None if args.seed is None else args.seed + ep
        info = run_random_episode(render=not args.no_render, seed=seed,
                                  max_steps=args.max_steps, asset_root=args.assets)
        results.append(info)

    if args.episodes > 1:
        scores = [r["score"] for r in results]
        print(f"\n{'=' * 50}")
        print(f"Episodes: {args.episodes}")
        print(f"Mean score: {sum(scores) / len(scores):.2f}")
        print(f"Best score: {max(scores)}")
        print(f"Games over: {sum(1 for r in results if r['game_over'])}")
        print(f"{'=' * 50}")


if __name__ == "__main__":
    main()
