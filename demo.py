"""
Console Tic Tac Toe.

A minimal UI shell over the game controller:
- Human vs human or human vs computer (LLM suggestion with fallback)
- Move history with time travel
"""

import argparse
import asyncio
import logging

from tictactoe import GameController, GameMode, Settings, create_default_suggester
from tictactoe.core.exceptions import IndexOutOfRangeError
from tictactoe.utils import SimpleBoardFormatter, format_move_history

HELP = """Commands:
  <row> <col>   place a mark (1-3, 1-3)
  jump <step>   go to a history step
  history       show move history
  reset         start over
  mode pvp|pvc  change mode (restarts)
  quit          exit"""


def render(game: GameController, formatter: SimpleBoardFormatter):
    print()
    print(formatter.format_board_with_highlights(game.snapshot, game.outcome.winning_line or ()))
    print(game.status_text())
    if game.advisory:
        print(game.advisory)


async def main():
    parser = argparse.ArgumentParser(description="Console Tic Tac Toe")
    parser.add_argument("--mode", choices=[m.value for m in GameMode], default=GameMode.HUMAN_VS_COMPUTER.value)
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = Settings.from_env()
    game = GameController(
        args.mode,
        suggester=create_default_suggester(settings),
        suggestion_timeout=settings.suggestion_timeout,
    )
    formatter = SimpleBoardFormatter()

    print("=== TIC TAC TOE ===")
    print(HELP)
    render(game, formatter)

    while True:
        if game.is_computer_turn:
            print("AI thinking...")
            await game.run_computer_turn()
            render(game, formatter)
            continue

        try:
            command = input("> ").strip().lower()
        except EOFError:
            break

        parts = command.split()
        if not parts:
            continue
        if parts[0] == "quit":
            break
        if parts[0] == "history":
            print(format_move_history(game.history, game.current_index))
            continue
        if parts[0] == "reset":
            game.reset()
        elif parts[0] == "mode" and len(parts) == 2 and parts[1] in ("pvp", "pvc"):
            game.set_mode(parts[1])
        elif parts[0] == "jump" and len(parts) == 2 and parts[1].isdigit():
            try:
                game.jump_to(int(parts[1]))
            except IndexOutOfRangeError as e:
                print(e.message)
                continue
        elif len(parts) == 2 and all(p.isdigit() for p in parts):
            result = game.apply_human_move(int(parts[0]) - 1, int(parts[1]) - 1)
            if not result.accepted:
                print(f"Move rejected: {result.reason}")
                continue
        else:
            print(HELP)
            continue

        render(game, formatter)


if __name__ == "__main__":
    asyncio.run(main())
