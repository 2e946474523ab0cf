"""Command-line interface."""
import argparse
import logging
import sys
from pathlib import Path

from labyrinth import grid
from labyrinth.config import TARGET_FPS, get_default_log_level
from labyrinth.errors import LabyrinthError
from labyrinth.logging_config import setup_logging
from labyrinth.maze import Maze
from labyrinth.pathfinding import Add, record
from labyrinth.session import Session

logger = logging.getLogger(__name__)


def read_maze(path):
    path = Path(path)
    return Maze.build(path.name, path.read_text(encoding='utf-8').strip())


def cmd_validate(args):
    failed = 0
    for name in args.files:
        reason = grid.find_violation(Path(name).read_text(encoding='utf-8').strip())
        if reason is None:
            print(f"{name}: ok")
        else:
            failed += 1
            print(f"{name}: {reason}")
    return 1 if failed else 0


def cmd_trace(args):
    maze = read_maze(args.file)
    steps = record(maze, max_steps=args.max_steps)
    for step in steps:
        sign = '+' if isinstance(step, Add) else '-'
        print(f"{sign} {step.col} {step.row}")
    adds = sum(1 for step in steps if isinstance(step, Add))
    print(f"{maze.name}: {len(steps)} steps, {adds} cells entered")
    return 0


def cmd_play(args):
    if args.save:
        import matplotlib
        matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    from labyrinth import render

    session = Session(max_steps=args.max_steps)
    if args.file:
        session.select(read_maze(args.file))
    session.enter()
    frames = args.frames or len(session.player.steps) + 1
    ani, fig = render.create_animation(session, frames=frames, fps=args.fps)

    if args.save:
        render.save_animation(ani, fig, args.save, frames, fps=args.fps)
    else:
        plt.show()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog='labyrinth', description='Maze validation and backtracking replay')
    parser.add_argument('--log-level', default=None, help='Logging level (default from LABYRINTH_LOG_LEVEL or INFO)')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    subparsers = parser.add_subparsers(dest='command', required=True)

    validate = subparsers.add_parser('validate', help='Check map files against the grid format')
    validate.add_argument('files', nargs='+')
    validate.set_defaults(func=cmd_validate)

    trace = subparsers.add_parser('trace', help='Print the backtracking step trace of a map')
    trace.add_argument('file')
    trace.add_argument('--max-steps', type=int, default=None, help='Fail if the trace grows past this many steps')
    trace.set_defaults(func=cmd_trace)

    play = subparsers.add_parser('play', help='Animate the trace (default map when no file is given)')
    play.add_argument('file', nargs='?')
    play.add_argument('--save', type=str, help='Write the animation to this file (.gif or a video format)')
    play.add_argument('--frames', type=int, default=None, help='Number of frames (default: one full loop)')
    play.add_argument('--fps', type=int, default=TARGET_FPS)
    play.add_argument('--max-steps', type=int, default=None)
    play.set_defaults(func=cmd_play)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")
    else:
        level = get_default_log_level()
    setup_logging(level=level, log_file=args.log_file)

    try:
        return args.func(args)
    except (LabyrinthError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
