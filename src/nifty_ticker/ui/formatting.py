"""Text formatting for quote display (Indian digit grouping)."""

from nifty_ticker.domain.models import Quote

MARKET_OPEN_TEXT = "🟢 Market Open"
MARKET_CLOSED_TEXT = "🔴 Market Closed - Last Trading Day Prices"
LAST_TRADING_DAY_SUFFIX = " (Last Trading Day)"
PLACEHOLDER = "--"


def group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,567 (last three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_price(value: float) -> str:
    """24280.5 -> '24,280.50'."""
    sign = "-" if value < 0 else ""
    whole, frac = f"{abs(value):.2f}".split(".")
    return f"{sign}{group_indian(whole)}.{frac}"


def format_change(value: float) -> str:
    """Signed change: '+150.25' / '-42.10'."""
    return f"+{format_price(value)}" if value >= 0 else format_price(value)


def format_change_percent(value: float) -> str:
    """Arrow and magnitude: '↑ 0.62%' / '↓ 0.45%'."""
    arrow = "↑" if value >= 0 else "↓"
    return f"{arrow} {abs(value):.2f}%"


def format_close(quote: Quote) -> str:
    close = quote.close
    return PLACEHOLDER if close is None else format_price(close)


def format_timestamp(quote: Quote) -> str:
    text = quote.observed_at.strftime("%I:%M:%S %p")
    if quote.is_stale:
        text += LAST_TRADING_DAY_SUFFIX
    return text


def market_status_text(is_open: bool) -> str:
    return MARKET_OPEN_TEXT if is_open else MARKET_CLOSED_TEXT
