"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Two modes:
- pvp: two humans share the keyboard / mouse
- ai:  play against the computer, which never loses
"""

import logging
import time

from logic.config import GameConfig
from logic.game_state import GameMode, Mark
from logic.session import GameSession


class ConsoleGame:
    """
    Console front end.

    Game flow:
    1. Board is printed with the free cells numbered 1-9
    2. Human types a cell number ('r' resets, 'q' quits)
    3. In AI mode the computer answers right away
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, mode: GameMode, human_mark: Mark):
        self.session = GameSession(mode=mode, human_mark=human_mark)
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print(f"   Mode: {self.session.mode.value.upper()}")
        if self.session.mode == GameMode.AI:
            print(f"   You play: {self.session.human_mark.value}")
            print(f"   AI plays: {self.session.ai_mark.value}")
        print("="*40)
        print("Type 1-9 to play, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.is_ai_turn:
                self._ai_move()
                continue

            self.session.game_state.print_board()
            print(self.session.status_text())

            if self.session.is_over:
                self._show_game_result()
                answer = input("\nPlay again? [y/N] ").strip().lower()
                if answer != "y":
                    self.is_running = False
                else:
                    self.session.reset()
                continue

            command = input("> ").strip().lower()
            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                print("\nResetting game...")
                self.session.reset()
            else:
                self._human_move(command)

    def _human_move(self, command: str):
        """Process a cell number typed by the human."""
        if not command.isdigit():
            print("Please type a cell number from 1 to 9.")
            return

        # Console cells are numbered 1-9, the board uses 0-8
        cell = int(command)
        if not 1 <= cell <= GameConfig.BOARD_CELLS:
            print(f"Please type a cell number from 1 to {GameConfig.BOARD_CELLS}.")
            return

        result = self.session.play_human_move(cell - 1)
        if result.accepted:
            return

        occupant = self.session.game_state.board[cell - 1]
        if occupant is not None:
            print(f"WARNING: Cell {cell} is already occupied by {occupant.value}")
        else:
            print(f"WARNING: {result.error_message}")

    def _ai_move(self):
        """Let the computer play."""
        print("\n>>> AI is thinking...")
        time.sleep(GameConfig.AI_DELAY_MS / 1000)

        result = self.session.play_ai_move()
        print(f">>> AI plays {result.mark.value} at {result.index + 1}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        winner = self.session.game_state.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif self.session.mode == GameMode.PVP:
            print(f"\n{winner.value} wins!")
        elif winner == self.session.human_mark:
            print("\nCongratulations! You won!")
        else:
            print("\nAI wins! Better luck next time!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with an unbeatable AI")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="pvp: two players, ai: play against the computer"
    )
    parser.add_argument(
        "--mark",
        choices=[m.value for m in Mark],
        default=GameConfig.DEFAULT_HUMAN_MARK,
        help="Your mark in ai mode (X moves first)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    mode = GameMode(args.mode)
    human_mark = Mark(args.mark)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(mode=mode, human_mark=human_mark)
        ui.run()
        return

    game = ConsoleGame(mode=mode, human_mark=human_mark)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
