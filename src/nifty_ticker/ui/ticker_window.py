"""Ticker window: quote fields, market status and a rolling price chart."""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

# Import matplotlib with Tk backend
import matplotlib
matplotlib.use('TkAgg')
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from nifty_ticker.domain.models import Quote
from nifty_ticker.ui import formatting

LINE_COLOR = "#667eea"
FILL_COLOR = "#667eea"
POSITIVE_COLOR = "#16a34a"
NEGATIVE_COLOR = "#dc2626"


class TickerWindow:
    """
    Presenter backed by Tkinter widgets.

    Must only be called on the Tk thread; DesktopApp puts a
    QueuedPresenter in front of it for ticks rendered by the scheduler.
    """

    def __init__(
        self,
        root: tk.Tk,
        display_name: str = "Nifty 50",
        on_refresh: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize ticker window.

        Args:
            root: Tkinter root window
            display_name: Instrument label shown in the header and legend
            on_refresh: Called when the Refresh button is pressed
        """
        self.root = root
        self.display_name = display_name
        self._on_refresh = on_refresh

        self.frame = ttk.Frame(root, padding="10")
        self.frame.pack(fill=tk.BOTH, expand=True)

        self._create_header()
        self._create_details()
        self._create_chart()

    def _create_header(self) -> None:
        header = ttk.Frame(self.frame)
        header.pack(fill=tk.X)

        ttk.Label(header, text=f"{self.display_name} Live Price", style='Title.TLabel').pack(side=tk.LEFT)
        ttk.Button(header, text="Refresh", command=self._refresh_clicked).pack(side=tk.RIGHT)

        self.status_label = ttk.Label(self.frame, text="", style='Info.TLabel')
        self.status_label.pack(anchor=tk.W, pady=(5, 0))

        price_row = ttk.Frame(self.frame)
        price_row.pack(fill=tk.X, pady=(10, 0))
        self.price_label = ttk.Label(price_row, text=formatting.PLACEHOLDER, font=('Helvetica', 32, 'bold'))
        self.price_label.pack(side=tk.LEFT)
        self.change_label = ttk.Label(price_row, text="", font=('Helvetica', 14))
        self.change_label.pack(side=tk.LEFT, padx=(15, 0))
        self.percent_label = ttk.Label(price_row, text="", font=('Helvetica', 14, 'bold'))
        self.percent_label.pack(side=tk.LEFT, padx=(10, 0))

    def _create_details(self) -> None:
        details = ttk.LabelFrame(self.frame, text="Session", padding="5")
        details.pack(fill=tk.X, pady=(10, 0))

        self.detail_labels: dict[str, ttk.Label] = {}
        for column, name in enumerate(("High", "Low", "Open", "Close")):
            ttk.Label(details, text=name, style='Heading.TLabel').grid(row=0, column=column, padx=15)
            value = ttk.Label(details, text=formatting.PLACEHOLDER)
            value.grid(row=1, column=column, padx=15)
            self.detail_labels[name] = value

        self.updated_label = ttk.Label(self.frame, text="", style='Info.TLabel')
        self.updated_label.pack(anchor=tk.E, pady=(5, 0))

    def _create_chart(self) -> None:
        chart_frame = ttk.LabelFrame(self.frame, text="Recent Prices", padding="5")
        chart_frame.pack(fill=tk.BOTH, expand=True, pady=(10, 0))

        self.figure = Figure(figsize=(6, 3), dpi=100)
        self.ax = self.figure.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.figure, chart_frame)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

    def _refresh_clicked(self) -> None:
        if self._on_refresh is not None:
            self._on_refresh()

    # Presenter interface

    def render(self, quote: Quote) -> None:
        color = POSITIVE_COLOR if quote.change_percent >= 0 else NEGATIVE_COLOR
        self.price_label.config(text=formatting.format_price(quote.price))
        self.change_label.config(text=formatting.format_change(quote.change))
        self.percent_label.config(
            text=formatting.format_change_percent(quote.change_percent),
            foreground=color,
        )
        self.detail_labels["High"].config(text=formatting.format_price(quote.day_high))
        self.detail_labels["Low"].config(text=formatting.format_price(quote.day_low))
        self.detail_labels["Open"].config(text=formatting.format_price(quote.open))
        self.detail_labels["Close"].config(text=formatting.format_close(quote))
        self.updated_label.config(text=f"Last updated: {formatting.format_timestamp(quote)}")

    def render_market_status(self, is_open: bool) -> None:
        self.status_label.config(text=formatting.market_status_text(is_open))

    def render_history(self, prices: Sequence[float]) -> None:
        prices = list(prices)
        self.ax.clear()
        if not prices:
            self.ax.text(0.5, 0.5, "Waiting for data", ha='center', va='center', fontsize=12)
            self.canvas.draw()
            return

        positions = list(range(1, len(prices) + 1))
        self.ax.plot(
            positions,
            prices,
            color=LINE_COLOR,
            linewidth=2,
            marker='o',
            markersize=4,
            label=f"{self.display_name} Price",
        )
        self.ax.fill_between(positions, prices, min(prices), color=FILL_COLOR, alpha=0.1)
        self.ax.set_xticks(positions)
        self.ax.grid(axis='y', alpha=0.2)
        self.ax.legend(loc='upper left', fontsize=9)

        self.figure.tight_layout()
        self.canvas.draw()
