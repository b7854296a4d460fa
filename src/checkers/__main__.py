"""Main entry point: hot-seat checkers in the terminal."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from .config import Config, get_config, get_config_file, reset_config, set_config
from .engine import Engine, MoveEvent, new_game
from .errors import CheckersError
from .game_state import Phase
from .movegen import moves_for
from .types import Player
from .utils import parse_square, setup_logger

logger = logging.getLogger("checkers.cli")

HELP_TEXT = (
    "Commands: 'row col' selects a piece or a highlighted square, "
    "'new' restarts, 'help' shows this text, 'quit' exits."
)


def render(engine: Engine, config: Config) -> str:
    """Board, turn line and the highlighted destinations of the selection."""
    state = engine.state
    highlights = [m.to_pos for m in state.legal_moves]
    lines = [state.board.render(config.display, highlights)]

    if state.is_over:
        lines.append(f"{config.player_name(state.winner)} wins!")
        return "\n".join(lines)

    lines.append(f"{config.player_name(state.current_player)}'s turn")
    if state.selected is not None:
        targets = ", ".join(f"{r} {c}" for r, c in highlights)
        label = "Continue capturing" if state.phase == Phase.CHAIN_CAPTURE else "Selected"
        lines.append(f"{label} {state.selected.position}: {targets}")
    return "\n".join(lines)


def handle_square(engine: Engine, square) -> Optional[MoveEvent]:
    """
    Route a clicked square: a highlighted destination plays the move,
    anything else is treated as a piece selection.
    """
    state = engine.state
    if any(m.to_pos == square for m in state.legal_moves):
        return engine.choose_destination(square)

    moves = engine.select_at(square)
    if not moves:
        logger.debug("No legal moves for the piece at %s", square)
    return None


def play(
    engine: Engine,
    config: Config,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> Optional[Player]:
    """
    Run the interactive loop until the user quits or input ends.

    Returns:
        The winner of the last game shown, or None
    """
    output(HELP_TEXT)
    output(render(engine, config))

    while True:
        try:
            line = input_fn("> ").strip().lower()
        except EOFError:
            break

        if line in ("quit", "exit", "q"):
            break
        if line in ("new", "reset"):
            engine.new_game()
            output(render(engine, config))
            continue
        if line in ("help", "?"):
            output(HELP_TEXT)
            continue

        square = parse_square(line)
        if square is None:
            output(f"Unrecognized input: {line!r}. {HELP_TEXT}")
            continue

        try:
            event = handle_square(engine, square)
        except CheckersError as e:
            logger.debug("Rejected %s: %s", square, e)
            output(str(e))
            continue

        if event == MoveEvent.CHAIN_CONTINUES:
            output("Capture again!")
        output(render(engine, config))

    return engine.winner


def print_initial_state(config: Config) -> None:
    """Print the initial board state and Player One's legal moves."""
    state = new_game()

    print("=" * 40)
    print("Checkers - Initial State")
    print("=" * 40)
    print()
    print(state.board.render(config.display))
    print()

    for piece in state.board.alive_pieces(Player.ONE):
        for move in moves_for(state.board, piece):
            print(f"  {move}")
    print()


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Two-player checkers in the terminal",
    )
    parser.add_argument("--show", action="store_true",
                        help="print the initial board and legal moves, then exit")
    parser.add_argument("--config", type=Path, default=None,
                        help="settings file (default: user config directory)")
    parser.add_argument("--log-level", default=None,
                        help="override the configured log level")
    parser.add_argument("--log-file", default=None,
                        help="also write logs to this file")
    parser.add_argument("--reset-config", action="store_true",
                        help="write default settings to the settings file, then exit")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.reset_config:
        reset_config(args.config)
        print(f"Default settings written to {args.config or get_config_file()}")
        return 0

    config = Config.load(args.config) if args.config else get_config()
    set_config(config)
    setup_logger(
        "checkers",
        log_file=args.log_file or config.logging.log_file or None,
        level=args.log_level or config.logging.level,
    )

    if args.show:
        print_initial_state(config)
        return 0

    engine = Engine()
    engine.on_game_over = lambda winner: logger.info(
        "%s wins", config.player_name(winner))
    play(engine, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
