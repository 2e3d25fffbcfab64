"""Services package — expose all concrete services from one import."""
from .game_store import GameStore
from .word_selector import WordSelector, UnknownWordError, word_text
from .shuffler import PresentationShuffler
from .puzzle_service import PuzzleService, GameNotFoundError

__all__ = [
    'GameStore',
    'WordSelector',
    'UnknownWordError',
    'word_text',
    'PresentationShuffler',
    'PuzzleService',
    'GameNotFoundError',
]
