"""
Interactive viewer for hexboard layouts.
Display one board at a time and page through the sample layouts with the keyboard.
"""

import logging

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from demo import LAYOUTS
from hexboard import HexBoard


class InteractiveViewer:
    """Read-only pager over named board layouts."""

    def __init__(self, layouts: dict[str, str]) -> None:
        self.layouts = layouts
        self.names = list(layouts)
        self.index = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def current_name(self) -> str:
        return self.names[self.index]

    @property
    def current_board(self) -> HexBoard[str]:
        return HexBoard.parse(self.layouts[self.current_name])

    def generate_display(self) -> Panel:
        """Generate the current display with board and status."""
        board = self.current_board

        status = Text()
        status.append("Layout: ", style="bold")
        status.append(f"{self.current_name} ({self.index + 1}/{len(self.names)})\n")
        status.append("Hexagons: ", style="bold")
        status.append(f"{len(board)}\n\n")

        status.append(board.render())
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N - Next layout\n")
        status.append("  P - Previous layout\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Hexboard Viewer", border_style="green", width=80)

    def step(self, delta: int) -> None:
        """Move to another layout, wrapping around at either end."""
        self.index = (self.index + delta) % len(self.names)
        self.status_message = f"Showing {self.current_name}"

    def run(self) -> None:
        """Run the viewer until the user quits."""
        if not self.names:
            print("ERROR: No layouts to show!")
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    # Update display
                    live.update(self.generate_display())

                    # Get single key press
                    key = readchar.readkey()

                    # Handle key press
                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'n':
                        self.step(1)
                    elif key.lower() == 'p':
                        self.step(-1)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render one layout
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial layout')
        print()

        name = sys.argv[2] if len(sys.argv) > 2 else 'four'
        print(HexBoard.parse(LAYOUTS[name]))
    else:
        InteractiveViewer(LAYOUTS).run()
