"""Blackjack basic strategy trainer: charts, table settings and terminal drills."""

__version__ = "0.1.0"
__all__ = ["settings", "strategy", "trainer"]