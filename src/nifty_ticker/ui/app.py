"""Desktop application main class."""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from nifty_ticker.app_context import AppContext
from nifty_ticker.ui.presenter import QueuedPresenter

# How often the Tk thread picks up renders queued by the scheduler
POLL_INTERVAL_MS = 50


class DesktopApp:
    """
    Main desktop application class.

    Manages the Tkinter root window, the application context and the
    timer lifecycle.
    """

    def __init__(self, context: Optional[AppContext] = None):
        """Initialize the desktop application."""
        self.root: Optional[tk.Tk] = None
        self.context = context or AppContext()
        self.window = None
        self._queued: Optional[QueuedPresenter] = None
        self._poll_id: Optional[str] = None

    def run(self) -> None:
        """Start the desktop application."""
        self.root = tk.Tk()
        self.root.title(self.context.settings.app_name)
        self.root.geometry("720x640")
        self.root.minsize(600, 480)

        self._configure_style()

        if not self.context.is_initialized:
            self.context.initialize()

        from nifty_ticker.ui.ticker_window import TickerWindow
        self.window = TickerWindow(
            self.root,
            display_name=self.context.settings.display_name,
            on_refresh=self.context.scheduler.refresh_now,
        )
        self._queued = QueuedPresenter(self.window)
        self.context.add_presenter(self._queued)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self.context.start()
        self._poll()
        self.root.mainloop()

    def _poll(self) -> None:
        """Apply queued renders on the Tk thread and reschedule."""
        self._queued.drain()
        self._poll_id = self.root.after(POLL_INTERVAL_MS, self._poll)

    def _configure_style(self) -> None:
        """Configure ttk styles for consistent appearance."""
        style = ttk.Style()

        # Try to use a native-looking theme
        available_themes = style.theme_names()
        if 'aqua' in available_themes:  # macOS
            style.theme_use('aqua')
        elif 'clam' in available_themes:
            style.theme_use('clam')

        style.configure('Title.TLabel', font=('Helvetica', 16, 'bold'))
        style.configure('Heading.TLabel', font=('Helvetica', 11, 'bold'))
        style.configure('Info.TLabel', font=('Helvetica', 10))

    def _on_close(self) -> None:
        """Stop polling and the timer before tearing down the window."""
        if self._poll_id is not None:
            self.root.after_cancel(self._poll_id)
            self._poll_id = None
        # Ticks finishing during shutdown only enqueue, so stop() never waits on Tk
        self._queued.close()
        self.context.close()
        self.root.destroy()
