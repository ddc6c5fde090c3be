"""Nifty 50 market ticker: quote pipeline, fallback chain and presenters."""

__version__ = "0.1.0"
