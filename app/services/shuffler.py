"""Flattens and shuffles the words of a reduced game for display."""
import random
from typing import Dict, List, Optional

from .word_selector import word_text


class PresentationShuffler:
    """Turns a reduced game into one randomly ordered word list so that the
    position of a word says nothing about its category."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def flatten(self, game: Dict) -> List[Dict]:
        """Return every word of *game* in category order.

        Each entry is ``{'text', 'lightColor', 'darkColor', 'category'}``;
        colours are ``None`` for bare-string words.
        """
        flat = []
        for cat in game.get('categories', []):
            for entry in cat.get('words', []):
                colours = entry if isinstance(entry, dict) else {}
                flat.append({
                    'text': word_text(entry),
                    'lightColor': colours.get('lightColor'),
                    'darkColor': colours.get('darkColor'),
                    'category': cat.get('name'),
                })
        return flat

    def shuffle(self, game: Dict) -> List[Dict]:
        """Return the flattened words of *game* in a fair random order."""
        flat = self.flatten(game)
        self._rng.shuffle(flat)
        return flat
