"""Random short ids.

Kept apart from `coding` so anything that only needs deterministic ids
never touches a random source.
"""

import logging
import random

import coding
import errors
import settings


log = logging.getLogger(__name__)

system_random = random.SystemRandom()


def generate(interval, rng=None):
    """Encode a uniformly random int from `interval`, a step-1 range.

    `rng` is anything with a ``randrange(start, stop)`` method, defaulting to
    the OS random source. Its errors (e.g. an empty interval) propagate.
    """
    if interval.step != 1:
        raise errors.InvalidRange("can't draw from %r" % (interval,))
    if rng is None:
        rng = system_random
    result = coding.encode(rng.randrange(interval.start, interval.stop))
    log.debug("generated id %s from %r", result, interval)
    return result


def generate_for_length(n, rng=None):
    """A random id at most `n` characters long."""
    top = coding.max_value_for_length(n)
    if n < 1:
        raise errors.InvalidLength("need at least one digit, got %r" % n)
    if top is None:
        raise errors.LengthOverflow("%r digits don't fit in %d bits" %
                                    (n, settings.word_bits))
    return generate(range(0, top + 1), rng)
