#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
clock_words.py - Turn a 12-hour time into the words and lights of the clock

A time is spoken on a five minute grid: "IL EST TROIS HEURES ET QUART",
"IL EST NEUF HEURES MOINS VINGT". Past the half hour the sentence counts
down to the next hour, which can carry the clock over noon or midnight.
"""

from typing import Iterable, List

from .config import get_testing_mode
from .logger import setup_logger
from .tokens import Token, hour_token

logger = setup_logger(__name__, testing=get_testing_mode())

# Minute phrases keyed by rounded minute. The half hour agrees with the
# hour name and is chosen in minute_phrase().
MINUTE_PHRASES = {
    0: (),
    5: (Token.FIVE,),
    10: (Token.TEN,),
    15: (Token.AND, Token.QUARTER),
    20: (Token.TWENTY,),
    25: (Token.TWENTY, Token.FIVE),
    35: (Token.MINUS, Token.TWENTY, Token.FIVE),
    40: (Token.MINUS, Token.TWENTY),
    45: (Token.MINUS, Token.THE, Token.QUARTER),
    50: (Token.MINUS, Token.TEN),
    55: (Token.MINUS, Token.FIVE),
}


class InvalidInput(ValueError):
    """A time field outside the 12-hour clock"""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(f"{field} out of range: {value}")


def validate_time(hour: int, minute: int) -> None:
    """Raise InvalidInput unless hour is 0..11 and minute is 0..59"""
    if not 0 <= hour <= 11:
        raise InvalidInput('hour', hour)
    if not 0 <= minute <= 59:
        raise InvalidInput('minute', minute)


def minute_phrase(minute: int, hour: int) -> List[Token]:
    """Tokens for a rounded minute; hour is the one that will be displayed"""
    if minute == 30:
        # "midi et demi", "minuit et demi" but "six heures et demie"
        half = Token.HALF_MASCULINE if hour == 0 else Token.HALF_FEMININE
        return [Token.AND, half]
    if minute not in MINUTE_PHRASES:
        raise AssertionError(f"unreachable rounded minute: {minute}")
    return list(MINUTE_PHRASES[minute])


def hour_phrase(is_pm: bool, hour: int) -> List[Token]:
    """Tokens naming the displayed hour, with its HEURE/HEURES agreement"""
    if hour == 0:
        return [Token.NOON if is_pm else Token.MIDNIGHT]
    if hour == 1:
        return [Token.HOUR_ONE, Token.SEPARATOR_SINGULAR]
    if 2 <= hour <= 11:
        return [hour_token(hour), Token.SEPARATOR_PLURAL]
    raise AssertionError(f"unreachable hour: {hour}")


def generate_tokens(is_pm: bool, hour: int, minute: int) -> List[Token]:
    """Tokens of the sentence for the given 12-hour time.

    hour is 0..11 (0 being noon or midnight) and minute is 0..59; anything
    else raises InvalidInput. Minutes are rounded down to a multiple of five.
    """
    validate_time(hour, minute)

    minute -= minute % 5

    # after half past, count down to the next hour
    if minute > 30:
        hour = (hour + 1) % 12
        if hour == 0:
            is_pm = not is_pm

    tokens = [Token.OPENING]
    tokens.extend(hour_phrase(is_pm, hour))
    tokens.extend(minute_phrase(minute, hour))
    logger.debug(f"Tokens for {hour}:{minute:02d} {'PM' if is_pm else 'AM'}: "
                 f"{[t.name for t in tokens]}")
    return tokens


def render_text(tokens: Iterable[Token]) -> str:
    """Sentence spelled by the tokens"""
    return " ".join(token.text for token in tokens)


def render_lights(tokens: Iterable[Token]) -> List[int]:
    """Light indices of the tokens, in order, duplicates kept"""
    lights = []
    for token in tokens:
        lights.extend(token.lights)
    return lights


def string_for_time(is_pm: bool, hour: int, minute: int) -> str:
    return render_text(generate_tokens(is_pm, hour, minute))


def lights_for_time(is_pm: bool, hour: int, minute: int) -> List[int]:
    return render_lights(generate_tokens(is_pm, hour, minute))
