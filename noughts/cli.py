"""
Noughts CLI - Play in the terminal.

Usage:
    noughts play [--player1 NAME] [--player2 NAME] [--rounds N]
    noughts state [--json]

Cells are entered as 1-9, left to right, top to bottom. Enter q to quit.
"""

import argparse
import logging
import sys

from .api import (
    GameService,
    CreateSessionRequest,
    ErrorResponse,
    TurnKind,
    RejectReasonValue,
)
from .config import GameConfig
from .engine_core.board import split_rows
from .session import SessionManager


def build_parser():
    parser = argparse.ArgumentParser(
        description="Noughts - two-player noughts and crosses",
        prog="noughts",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--player1", default=None, help="Name for X (moves first)")
    play_parser.add_argument("--player2", default=None, help="Name for O")
    play_parser.add_argument(
        "--rounds", type=int, default=None,
        help="Stop after this many finished rounds (default: until quit)",
    )

    # State command
    state_parser = subparsers.add_parser("state", help="Print a fresh game state")
    state_parser.add_argument("--json", action="store_true", help="Print as JSON")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "state":
        return cmd_state(args)
    else:
        parser.print_help()
        sys.exit(1)


def render_board(board):
    """Draw the 9 cells as a grid, showing free cells by their number."""
    labels = [cell.value or str(i + 1) for i, cell in enumerate(board)]
    rows = [" " + " | ".join(row) for row in split_rows(labels)]
    return "\n---+---+---\n".join(rows)


def make_service():
    return GameService(session_manager=SessionManager(config=GameConfig.from_env()))


def read_index(prompt):
    """
    Ask for a cell until the answer parses.

    Returns the 0-based index, or None if the player quit.
    """
    while True:
        try:
            raw = input(prompt).strip()
        except EOFError:
            return None
        if raw.lower() in ("q", "quit", "exit"):
            return None
        if raw.isdecimal():
            return int(raw) - 1
        print("Enter a cell number from 1 to 9.")


def cmd_play(args):
    """Play rounds until --rounds is reached or the player quits."""
    service = make_service()
    state = service.create_session(
        CreateSessionRequest(player1_name=args.player1, player2_name=args.player2)
    )
    session_id = state.session_id
    finished = 0

    print(render_board(state.board))
    print(state.status_text)

    while args.rounds is None or finished < args.rounds:
        index = read_index("Cell: ")
        if index is None:
            break

        turn = service.play_turn(session_id, index)
        if isinstance(turn, ErrorResponse):
            print("Enter a cell number from 1 to 9.")
            continue

        if turn.kind == TurnKind.REJECTED:
            if turn.reason == RejectReasonValue.CELL_OCCUPIED:
                print("That cell is taken.")
            continue

        print(render_board(turn.state.board))
        if turn.kind == TurnKind.TERMINAL:
            print(turn.message)
            finished += 1
            state = service.reset_game(session_id)
            if args.rounds is None or finished < args.rounds:
                print()
                print(render_board(state.board))
                print(state.status_text)
        else:
            print(turn.state.status_text)

    service.end_session(session_id)
    return 0


def cmd_state(args):
    """Print the state of a freshly created session."""
    service = make_service()
    state = service.create_session()
    if args.json:
        print(state.model_dump_json(indent=2))
    else:
        print(render_board(state.board))
        print(state.status_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
