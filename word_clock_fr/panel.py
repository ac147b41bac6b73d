from typing import Iterable, List, Tuple

from .tokens import Token

def lights_by_token(tokens: Iterable[Token]) -> List[Tuple[Token, Tuple[int, ...]]]:
    """Pair every token with its lights so each word can be driven on its own"""
    return [(token, token.lights) for token in tokens]

def frame_for_lights(lights: Iterable[int], num_pixels: int) -> List[bool]:
    """On/off state of every light on a strip of num_pixels lights"""
    frame = [False] * num_pixels
    for light in lights:
        if not 0 <= light < num_pixels:
            raise ValueError(f"Light index {light} out of bounds for {num_pixels} lights")
        frame[light] = True
    return frame
