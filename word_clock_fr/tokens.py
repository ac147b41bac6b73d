#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
tokens.py - Words of the French word clock and where they sit on the panel
"""

from enum import Enum, unique
from typing import Tuple

# Printed segment behind each light, indexed by light number.
# A segment that starts a word carries a leading space.
PANEL_LABELS = (
    "IL", " EST", " DEUX", " QUATRE", " TROIS", " NEUF", " UNE", " SEPT",
    " HUIT", " SIX", " CINQ", " MI", "DI", "X", " MINUIT", " ONZE",
    " HEURE", "S", " MOINS", " LE", " DIX", " ET", " QUART", " VINGT",
    " CINQ", " DEMI", "E",
)


@unique
class Token(Enum):
    """One fragment of a spoken French time, with the lights that spell it"""

    OPENING = ("IL EST", (0, 1))

    HOUR_ONE = ("UNE", (6,))
    HOUR_TWO = ("DEUX", (2,))
    HOUR_THREE = ("TROIS", (4,))
    HOUR_FOUR = ("QUATRE", (3,))
    HOUR_FIVE = ("CINQ", (10,))
    HOUR_SIX = ("SIX", (9,))
    HOUR_SEVEN = ("SEPT", (7,))
    HOUR_EIGHT = ("HUIT", (8,))
    HOUR_NINE = ("NEUF", (5,))
    # light 12 is shared with NOON
    HOUR_TEN = ("DIX", (12, 13))
    HOUR_ELEVEN = ("ONZE", (15,))
    NOON = ("MIDI", (11, 12))
    MIDNIGHT = ("MINUIT", (14,))

    SEPARATOR_SINGULAR = ("HEURE", (16,))
    SEPARATOR_PLURAL = ("HEURES", (16, 17))

    MINUS = ("MOINS", (18,))
    THE = ("LE", (19,))
    TEN = ("DIX", (20,))
    AND = ("ET", (21,))
    QUARTER = ("QUART", (22,))
    TWENTY = ("VINGT", (23,))
    FIVE = ("CINQ", (24,))
    HALF_MASCULINE = ("DEMI", (25,))
    HALF_FEMININE = ("DEMIE", (25, 26))

    def __init__(self, text: str, lights: Tuple[int, ...]):
        self.text = text
        self.lights = lights

    def __repr__(self):
        return f"<Token.{self.name}: {self.text!r}>"


HOUR_NAMES = {
    1: Token.HOUR_ONE,
    2: Token.HOUR_TWO,
    3: Token.HOUR_THREE,
    4: Token.HOUR_FOUR,
    5: Token.HOUR_FIVE,
    6: Token.HOUR_SIX,
    7: Token.HOUR_SEVEN,
    8: Token.HOUR_EIGHT,
    9: Token.HOUR_NINE,
    10: Token.HOUR_TEN,
    11: Token.HOUR_ELEVEN,
}


def hour_token(hour: int) -> Token:
    """Hour-name token for 1..11"""
    try:
        return HOUR_NAMES[hour]
    except KeyError:
        raise ValueError(f"No hour name for {hour}") from None
