"""French word clock: the sentence and the lights for a time of day"""

from .tokens import PANEL_LABELS, Token, hour_token
from .clock_words import (
    InvalidInput,
    generate_tokens,
    lights_for_time,
    render_lights,
    render_text,
    string_for_time,
)
from .clock_source import hm12, now_hm12, parse_time
from .panel import frame_for_lights, lights_by_token

__all__ = [
    "PANEL_LABELS",
    "Token",
    "hour_token",
    "InvalidInput",
    "generate_tokens",
    "render_text",
    "render_lights",
    "string_for_time",
    "lights_for_time",
    "hm12",
    "now_hm12",
    "parse_time",
    "frame_for_lights",
    "lights_by_token",
]
