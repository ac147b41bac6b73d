#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
led_time.py - Emit the lights for a time as JSON for the panel driver

The driver reads one object per line:
    {"text": "...", "lights": [0, 1, ...], "frame": [1, 1, 0, ...],
     "words": [["OPENING", [0, 1]], ...]}

"words" pairs each word with its lights so a driver can colour words apart.
"""

import sys
import json

from .clock_words import generate_tokens, render_lights, render_text
from .config import get_num_pixels, get_testing_mode
from .logger import setup_logger
from .panel import frame_for_lights, lights_by_token
from .print_time import time_from_args

# Get logger
logger = setup_logger('led_time', testing=get_testing_mode())

def build_payload(is_pm, hour, minute, num_pixels):
    """Text, lights, per-word lights and strip frame for one time"""
    tokens = generate_tokens(is_pm, hour, minute)
    words = [[token.name, list(lights)] for token, lights in lights_by_token(tokens)]
    logger.debug(f"Words: {words}")
    lights = render_lights(tokens)
    frame = frame_for_lights(lights, num_pixels)
    return {
        "text": render_text(tokens),
        "lights": lights,
        "frame": [int(lit) for lit in frame],
        "words": words,
    }

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    try:
        is_pm, hour, minute = time_from_args(args)
        payload = build_payload(is_pm, hour, minute, get_num_pixels())
    except ValueError as e:
        logger.error(f"Cannot light time {args}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload))
    return 0

if __name__ == "__main__":
    sys.exit(main())
