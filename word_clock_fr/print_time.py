#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys

from .clock_source import now_hm12, parse_time
from .clock_words import string_for_time
from .config import get_testing_mode, get_timezone
from .logger import setup_logger

# Get logger
logger = setup_logger('print_time', testing=get_testing_mode())

def time_from_args(args):
    """Time given on the command line, or now in the configured zone"""
    if args:
        return parse_time(" ".join(args))
    return now_hm12(get_timezone())

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    try:
        is_pm, hour, minute = time_from_args(args)
        text = string_for_time(is_pm, hour, minute)
    except ValueError as e:
        logger.error(f"Cannot render time {args}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Rendered: {text}")
    print(text)
    return 0

if __name__ == "__main__":
    sys.exit(main())
