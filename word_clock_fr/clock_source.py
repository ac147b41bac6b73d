#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import re
from datetime import datetime
from typing import Optional, Tuple

from dateutil import parser, tz

from .clock_words import InvalidInput
from .config import get_testing_mode
from .logger import setup_logger

logger = setup_logger(__name__, testing=get_testing_mode())

# Time pattern components
TIME_COMPONENTS = {
    'hours': r'(\d{1,2})',                  # 1-12
    'minutes': r'(?:[:.](\d{2}))?',         # :00-:59 or .00-.59
    'meridiem': r'([ap])(?:\s*m)?',         # a/p/am/pm
    'spaces': r'\s*',                       # Optional spaces
}

def build_time_pattern():
    """Build 12-hour time pattern from components"""
    return (r"^\s*"
            f"{TIME_COMPONENTS['hours']}"
            f"{TIME_COMPONENTS['minutes']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['meridiem']}"
            r"\.?\s*$")

TIME_PATTERN = re.compile(build_time_pattern(), re.IGNORECASE)

def hm12(moment) -> Tuple[bool, int, int]:
    """(is_pm, hour 0..11, minute) for a datetime or time"""
    return moment.hour >= 12, moment.hour % 12, moment.minute

def now_hm12(tz_name: Optional[str] = None) -> Tuple[bool, int, int]:
    """Current time as (is_pm, hour, minute) in the named or local zone"""
    zone = tz.gettz(tz_name) if tz_name else tz.tzlocal()
    if zone is None:
        raise ValueError(f"Unknown timezone: {tz_name}")
    now = datetime.now(zone)
    logger.debug(f"Now in {tz_name or 'local time'}: {now.isoformat()}")
    return hm12(now)

def parse_time_match(match) -> Tuple[bool, int, int]:
    """Parse a 12-hour regex match into (is_pm, hour, minute)"""
    hour = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3).lower()  # Will be 'a' or 'p'

    if not 1 <= hour <= 12:
        raise InvalidInput('hour', hour)
    if minutes > 59:
        raise InvalidInput('minute', minutes)

    return meridiem == 'p', hour % 12, minutes

def parse_time(text: str) -> Tuple[bool, int, int]:
    """Parse "7p", "7:30 pm", "12am" or a 24-hour "19:30" into (is_pm, hour, minute)"""
    match = TIME_PATTERN.match(text)
    if match:
        return parse_time_match(match)

    # Parse against two defaults: fields the text does not name come back different
    try:
        parsed = parser.parse(text, default=datetime(2000, 1, 1, 0, 0))
        check = parser.parse(text, default=datetime(2000, 1, 1, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Cannot read a time from {text!r}") from e
    if (parsed.hour, parsed.minute) != (check.hour, check.minute):
        raise ValueError(f"Cannot read a time from {text!r}")
    return hm12(parsed)
