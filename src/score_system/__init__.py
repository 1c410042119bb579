"""
Score System - round timing and scoring for the memory game
"""

from .level_score_manager import LevelScoreManager

__all__ = ['LevelScoreManager']
