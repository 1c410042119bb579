"""
Display System - console rendering of the memory game

Usage:
    from display_system import ConsolePresenter, StaticLabelProvider

    presenter = ConsolePresenter(highlight_ms=600)
    labels = StaticLabelProvider()
"""

from .console_presenter import ConsolePresenter, StaticLabelProvider, DEFAULT_LABELS

__all__ = ['ConsolePresenter', 'StaticLabelProvider', 'DEFAULT_LABELS']
