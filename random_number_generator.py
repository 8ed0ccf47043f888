"""
Random integer in a stepped range
"""
import logging
import math
import random
from fractions import Fraction
from typing import Optional

from event_log import log_event
from number_checks import is_integer, not_


class InvalidArgument(ValueError):
    """Raised when random_integer receives arguments it cannot use"""


def _reject(message: str, **data):
    log_event("invalid_argument", level=logging.DEBUG, error=message, **data)
    raise InvalidArgument(message)


def _validate_start(start):
    if not_(is_integer(start)):
        _reject(f'Expected "start" to be integer, found "{start}"', start=start)


def _validate_end(end):
    if not_(is_integer(end)):
        _reject(f'Expected "end" to be integer, found "{end}"', end=end)


def _validate_step(step, start, end):
    if not_(is_integer(step)) or step == 0:
        _reject(f'Expected "step" to be a non-zero integer, found "{step}"', step=step)
    if start < end and step < 0:
        _reject(
            'Expected "step" to be positive if "start" is less than "end"',
            start=start, end=end, step=step,
        )
    if start > end and step > 0:
        _reject(
            'Expected "step" to be negative if "start" is greater than "end"',
            start=start, end=end, step=step,
        )


def random_integer(start: int, end: int, step: int, rng: Optional[random.Random] = None) -> int:
    """
    Return a random integer from start towards end, moving in increments of step

    The result is one of start, start + step, start + 2 * step, ... and never
    goes past end. Every reachable value is equally likely. When start == end
    the step may have either sign.

    Note: this is not cryptographically strong and shouldn't be used in
    systems that demand high security.

    Args:
        start: Beginning of the range
        end: End of the range
        step: Increment or decrement between numbers in the range
        rng: Source with a random() method returning floats in [0, 1).
            Defaults to the shared module-level generator.

    Returns:
        Random integer

    Raises:
        InvalidArgument: start or end is not an integer, step is zero or not
            an integer, or step points away from end
    """
    _validate_start(start)
    _validate_end(end)
    _validate_step(step, start, end)

    # whole floats like 2.0 pass validation
    start, end, step = int(start), int(end), int(step)
    draw = rng.random if rng is not None else random.random

    count = (end - start) // step + 1
    # exact, so huge counts neither overflow nor round up to count
    index = math.floor(Fraction(draw()) * count)
    value = start + index * step

    log_event(
        "draw", level=logging.DEBUG,
        start=start, end=end, step=step, count=count, value=value,
    )
    return value


if __name__ == "__main__":
    # Example usage
    number = random_integer(0, 100, 5)
    print(f"Random number: {number}")
