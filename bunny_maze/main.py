import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'bunny_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bunny_maze.config import GameConfig


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser(config: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bunny Maze: queue moves, then guide the bunny to the carrot")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--store", type=str, default=config.store_path, help="Win counter file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Open the game window")
    play_parser.add_argument("--size", type=int, default=config.default_size,
                             help=f"Maze size ({config.min_size}-{config.max_size})")
    play_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    play_parser.add_argument("--light", action="store_true", help="Start in light mode")
    play_parser.add_argument("--record", action="store_true", help="Record the session to mp4")
    play_parser.add_argument("--out", type=str, help="Recording file path (optional)")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Print a new maze")
    gen_parser.add_argument("--size", type=int, default=config.default_size, help="Maze size")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--show-path", action="store_true", help="Mark the guaranteed path")
    gen_parser.add_argument("--stats", action="store_true", help="Print maze statistics")

    # Run Command
    run_parser = subparsers.add_parser("run", help="Run a move sequence against a generated maze")
    run_parser.add_argument("moves", help="Moves as letters, e.g. RRDDRD")
    run_parser.add_argument("--size", type=int, default=config.default_size, help="Maze size")
    run_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Wins Command
    subparsers.add_parser("wins", help="Show the total number of wins")

    return parser


def main(argv=None):
    config = GameConfig()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("bunny_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.debug(f"Running command: {args.command}")

    from bunny_maze.io.store import JsonFileStore
    from bunny_maze.core.score import WinCounter

    try:
        win_counter = WinCounter(JsonFileStore(args.store))
    except ValueError as e:
        parser.error(str(e))

    if args.command == "play":
        from bunny_maze.game import GameSession
        from bunny_maze.viz.renderer import Renderer
        from bunny_maze.viz.recorder import SessionRecorder, default_output_file

        config.default_size = config.clamp_size(args.size)
        session = GameSession(config, win_counter=win_counter, seed=args.seed)
        session.dark_mode = not args.light
        logger.info(f"Starting {session.maze_size}x{session.maze_size} game, total wins: {session.wins}")

        recorder = None
        if args.record:
            out = args.out or default_output_file(session.maze_size)
            recorder = SessionRecorder(active=True, output_file=out)
            logger.info(f"Recording video to {out}")

        renderer = Renderer(session, recorder=recorder)
        renderer.init_window()
        renderer.run_loop()

    elif args.command == "generate":
        from bunny_maze.algo.staircase import generate_maze

        if args.size < 1:
            parser.error("--size must be at least 1")

        logger.info(f"Generating {args.size}x{args.size} maze...")
        maze, path = generate_maze(args.size, seed=args.seed)
        print(maze.render_ascii(path if args.show_path else ()))

        if args.stats:
            from bunny_maze.core.complexity import MazeAnalyzer
            stats = MazeAnalyzer.calculate_stats(maze)
            logger.info(f"Stats: {stats}")

    elif args.command == "run":
        from bunny_maze.algo.staircase import generate_maze
        from bunny_maze.algo.runner import StepRunner
        from bunny_maze.core.moves import MoveQueue

        if args.size < 1:
            parser.error("--size must be at least 1")
        try:
            queue = MoveQueue.from_string(args.moves)
        except ValueError as e:
            parser.error(str(e))

        maze, _ = generate_maze(args.size, seed=args.seed)
        result = StepRunner(maze, win_counter=win_counter).run(queue)

        print(maze.render_ascii(result.path))
        print(f"Outcome: {result.outcome.value}  Position: {result.position}  Wins: {win_counter.value}")
        if result.blocked is not None:
            print(f"Blocked by obstacle at {result.blocked}")

    elif args.command == "wins":
        print(f"Total Wins: {win_counter.value}")


if __name__ == "__main__":
    main()
