#!/usr/bin/env python3
"""Play Amazons against the alpha-beta AI via the console, with optional logging & replay."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from amazons import AlphaBetaPolicy, Board, Piece, SearchConfig, format_move, parse_move


def format_board(board: Board) -> str:
    footer = "    " + " ".join(chr(ord("a") + col) for col in range(10))
    lines = []
    for number, line in zip(range(10, 0, -1), str(board).splitlines()):
        lines.append(f"{number:>2}{line}")
    lines.append(footer)
    return "\n".join(lines)


def prompt_human_move(board: Board):
    while True:
        raw = input("Your move, e.g. d1-d7(g7) (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        try:
            move = parse_move(raw)
        except ValueError as exc:
            print(exc)
            continue
        if board.is_legal(move):
            return move
        print("Illegal move. Try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    board = Board()
    if verbose:
        print("Replaying logged game.")
        print(format_board(board))
    for entry in moves:
        move = parse_move(entry["move"])
        board.play(move)
        if verbose:
            actor = entry.get("actor", "unknown")
            side = entry.get("side", "?")
            print(f"{actor} ({side}) plays {format_move(move)}")
            print(format_board(board))
    winner = board.winner
    summary = {
        "winner": winner.name if winner is not None else None,
        "moves": len(moves),
        "turn": board.turn.name,
        "board": board.grid.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Winner: {summary['winner']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = SearchConfig(depth=args.depth, canonical_bounds=not args.legacy_bounds)
    policy_ai = AlphaBetaPolicy(config)
    human_side = Piece.WHITE if args.human_side == "white" else Piece.BLACK
    log_records: List[Dict] = []

    board = Board()
    while board.winner is None and board.num_moves < args.max_ply:
        print("\nCurrent board:")
        print(format_board(board))
        print(f"To move: {board.turn.name}")

        side = board.turn
        if side == human_side:
            move = prompt_human_move(board)
            actor = "human"
        else:
            move = policy_ai.act(board)
            actor = "ai"
            print(f"AI ({side.name}) plays {format_move(move)}")

        log_records.append(
            {
                "move_index": board.num_moves,
                "actor": actor,
                "side": side.name,
                "move": format_move(move),
            }
        )
        board.play(move)

    print("\nFinal board:")
    print(format_board(board))
    if board.winner is not None:
        print(f"{board.winner.name} wins!")
    else:
        print("Move limit reached.")

    if args.log_file:
        metadata = {
            "human_side": args.human_side,
            "depth": args.depth,
            "legacy_bounds": args.legacy_bounds,
            "winner": board.winner.name if board.winner is not None else None,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Amazons in the console against the AI.")
    parser.add_argument("--human-side", choices=["white", "black"], default="white")
    parser.add_argument("--depth", type=int, default=2)
    parser.add_argument("--legacy-bounds", action="store_true", help="Use the legacy bound folding")
    parser.add_argument("--max-ply", type=int, default=200)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
