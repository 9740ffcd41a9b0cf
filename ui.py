"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Mode selection (two players or vs AI)
- Mark selection for the human in AI mode
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.game_state import GameMode, Mark
from logic.session import GameSession


# Colors
BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
WIN_COLOR = '#065f46'
MARK_COLORS = {
    Mark.X: '#f87171',
    Mark.O: '#10b981',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        mode: GameMode = GameMode(GameConfig.DEFAULT_MODE),
        human_mark: Mark = Mark(GameConfig.DEFAULT_HUMAN_MARK)
    ):
        """Initialize the UI."""
        self.session = GameSession(mode=mode, human_mark=human_mark)

        # Pending after() callback for the AI move
        self.pending_ai_move: Optional[str] = None

        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('TRadiobutton', background=BG_COLOR, foreground='white', font=('Segoe UI', 10))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        ttk.Label(mode_frame, text="Mode:").pack(side=tk.LEFT, padx=(0, 5))
        self.mode_var = tk.StringVar(value=self.session.mode.value)
        for text, value in [("Two players", GameMode.PVP.value), ("vs AI", GameMode.AI.value)]:
            ttk.Radiobutton(
                mode_frame,
                text=text,
                value=value,
                variable=self.mode_var,
                command=self._on_mode_change
            ).pack(side=tk.LEFT, padx=5)

        # Mark picker (only matters in AI mode)
        mark_frame = ttk.Frame(main_frame)
        mark_frame.pack(pady=5)

        ttk.Label(mark_frame, text="You play:").pack(side=tk.LEFT, padx=(0, 5))
        self.mark_var = tk.StringVar(value=self.session.human_mark.value)
        self.mark_buttons = []
        for mark in Mark:
            btn = ttk.Radiobutton(
                mark_frame,
                text=mark.value,
                value=mark.value,
                variable=self.mark_var,
                command=self._on_mark_change
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mark_buttons.append(btn)

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=15)

        self.board_cells = []
        for index in range(GameConfig.BOARD_CELLS):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=CELL_COLOR,
                fg='white',
                disabledforeground='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Reset button
        tk.Button(
            main_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_mode_change(self):
        """Switch between two players and vs AI."""
        self._new_game()

    def _on_mark_change(self):
        """The human picked X or O."""
        if self.mode_var.get() == GameMode.AI.value:
            self._new_game()

    def _new_game(self):
        """Reset the board using the current mode and mark selection."""
        self._cancel_pending_ai_move()

        mode = GameMode(self.mode_var.get())
        self.session.reset(mode=mode, human_mark=Mark(self.mark_var.get()))

        # Mark picker is only enabled in AI mode
        picker_state = '!disabled' if mode == GameMode.AI else 'disabled'
        for btn in self.mark_buttons:
            btn.state([picker_state])

        for cell in self.board_cells:
            cell.configure(text="", bg=CELL_COLOR, state='normal')

        # Human chose O: the AI (X) opens
        if self.session.is_ai_turn:
            self._schedule_ai_move()

        self._update_status()

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if self.pending_ai_move is not None:
            return

        result = self.session.play_human_move(index)
        if not result.accepted:
            return

        self._draw_move(result.index, result.mark)

        if self.session.is_over:
            self._show_game_over()
            return

        if self.session.is_ai_turn:
            self._schedule_ai_move()

        self._update_status()

    def _schedule_ai_move(self):
        """Let the AI answer after a short pause."""
        self.pending_ai_move = self.root.after(GameConfig.AI_DELAY_MS, self._ai_move)

    def _cancel_pending_ai_move(self):
        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

    def _ai_move(self):
        """Play the AI move (runs on the UI thread)."""
        self.pending_ai_move = None

        result = self.session.play_ai_move()
        if not result.accepted:
            return

        self._draw_move(result.index, result.mark)

        if self.session.is_over:
            self._show_game_over()
        else:
            self._update_status()

    def _draw_move(self, index: int, mark: Mark):
        """Show a mark in a cell and lock it."""
        self.board_cells[index].configure(
            text=mark.value,
            disabledforeground=MARK_COLORS[mark],
            state='disabled'
        )

    def _show_game_over(self):
        """Highlight the winning line and lock the board."""
        line = self.session.game_state.winning_line
        if line:
            for index in line:
                self.board_cells[index].configure(bg=WIN_COLOR)

        for cell in self.board_cells:
            cell.configure(state='disabled')

        self._update_status()

    def _update_status(self):
        """Update the status label."""
        self.status_label.configure(text=self.session.status_text())

    def _quit(self):
        """Quit the application."""
        self._cancel_pending_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
