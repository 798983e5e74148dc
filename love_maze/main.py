import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'love_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from love_maze.io.card import CardState, SENDER, DEFAULT_ME, DEFAULT_YOU

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def add_maze_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--cols", type=int, default=10, help="Maze columns")
    parser.add_argument("--rows", type=int, default=10, help="Maze rows")
    parser.add_argument("--padding", type=int, default=4, help="Empty cells around the maze")
    parser.add_argument("--size", type=int, default=900, help="Canvas size in pixels")
    parser.add_argument("--me", type=str, default=DEFAULT_ME, help="Sender name")
    parser.add_argument("--you", type=str, default=DEFAULT_YOU, help="Recipient name")
    parser.add_argument("--message", type=str, default="", help="Card message")
    parser.add_argument("--data", type=str, help="Encoded card data from a share link")
    parser.add_argument("--seed", type=str, default=None, help="Override the seed derived from the names")

def card_from_args(args) -> CardState:
    if args.data:
        return CardState.from_query({"data": args.data})
    return CardState(SENDER, args.me, args.you, args.message)

def main():
    parser = argparse.ArgumentParser(description="Love Maze: seeded greeting-card maze")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze headless and print it")
    add_maze_arguments(gen_parser)
    gen_parser.add_argument("--out", type=str, help="Output file path (optional)")
    gen_parser.add_argument("--compress", action="store_true", help="zlib-compress stored cells")
    gen_parser.add_argument("--seed-only", action="store_true", help="Store only the seed and dimensions")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Open the animated card")
    add_maze_arguments(play_parser)
    play_parser.add_argument("--colors", type=str, default="HSL", choices=["HSL", "BW"], help="Color scheme")
    play_parser.add_argument("--record", action="store_true", help="Record the card to mp4")
    play_parser.add_argument("--record-dir", type=str, default="recordings", help="Directory for recordings")
    play_parser.add_argument("--tail", type=float, default=2.0, help="Seconds recorded after the maze is done")

    # Link Command
    link_parser = subparsers.add_parser("link", help="Print a share link for a card")
    link_parser.add_argument("--me", type=str, required=True, help="Sender name")
    link_parser.add_argument("--you", type=str, required=True, help="Recipient name")
    link_parser.add_argument("--message", type=str, default="", help="Card message")
    link_parser.add_argument("--base-url", type=str, default="https://example.com/", help="Card page URL")

    # Load Command
    load_parser = subparsers.add_parser("load", help="Load a saved maze and print it")
    load_parser.add_argument("input_file", help="Path to maze file")

    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("love_maze")

    if args.command is None:
        parser.print_help()
        return

    logger.debug(f"Running command: {args.command}")

    if args.command in ("generate", "play"):
        from love_maze.core.maze import Maze

        card = card_from_args(args)
        seed = args.seed if args.seed is not None else card.seed
        try:
            maze = Maze(args.cols, args.rows, args.padding, seed, args.size, args.size)
        except ValueError as e:
            parser.error(str(e))

        logger.info(f"Maze {args.cols}x{args.rows} for {card.me} and {card.you} (seed '{seed}')")

        if args.command == "generate":
            from love_maze.core.complexity import MazeAnalyzer
            from love_maze.viz.ascii import render_ascii

            steps = maze.run_all()
            logger.info(f"Generated in {steps} steps")
            stats = MazeAnalyzer.calculate_stats(maze.grid)
            logger.info(f"Stats: {stats}")
            logger.info(f"Path to exit: {len(MazeAnalyzer.path_to_exit(maze))} cells")
            print(render_ascii(maze.grid))

            if args.out:
                from love_maze.io.serializer import MazeSerializer
                logger.info(f"Saving maze to {args.out}...")
                MazeSerializer.save(maze, args.out, seed_only=args.seed_only, compress=args.compress)
                logger.info("Save complete.")
        else:
            from love_maze.core.rng import RandomSource
            from love_maze.viz.colors import create_color_scheme
            from love_maze.viz.renderer import Renderer

            recorder = None
            if args.record:
                from love_maze.viz.recorder import VideoRecorder
                recorder = VideoRecorder.for_maze(maze, args.record_dir, Renderer.FPS, args.tail)
                logger.info(f"Recording video to {recorder.output_file}")

            colors = create_color_scheme(args.colors, RandomSource(seed))
            renderer = Renderer(maze, colors, card, recorder=recorder)
            renderer.init_window()
            renderer.run_loop()

    elif args.command == "link":
        card = CardState.default().with_form_values(args.me, args.you, args.message)
        print(card.share_text())
        print(card.share_link(args.base_url))

    elif args.command == "load":
        from love_maze.io.serializer import MazeSerializer
        from love_maze.core.complexity import MazeAnalyzer
        from love_maze.viz.ascii import render_ascii

        logger.info(f"Loading {args.input_file}...")
        try:
            maze = MazeSerializer.load(args.input_file)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load {args.input_file}: {e}")
            sys.exit(1)
        logger.info(f"Loaded {maze.cols}x{maze.rows} maze (seed '{maze.seed}')")
        logger.info(f"Stats: {MazeAnalyzer.calculate_stats(maze.grid)}")
        print(render_ascii(maze.grid))

if __name__ == "__main__":
    main()
