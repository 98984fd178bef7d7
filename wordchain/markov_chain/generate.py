import logging
import random
import time

logger = logging.getLogger(__name__)

_default_rng = None


def make_rng(seed=None):
    """Returns a new random source, seeded from the clock unless `seed` is given."""
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)


def default_rng():
    # Seeded once per process, on first use
    global _default_rng
    if _default_rng is None:
        _default_rng = make_rng()
    return _default_rng


def iter_sequence(chain, length=100, rng=None):
    """
    Walks `chain` from an empty prefix, yielding at most `length` words.

    The walk ends early when the current prefix has no recorded suffixes,
    e.g. at the end of the training text. `rng` is anything with a
    `choice(sequence)` method and defaults to the process-wide source.
    Each call keeps its own prefix; the chain itself is only read.
    """
    if rng is None:
        rng = default_rng()
    prefix = chain.new_prefix()

    for _ in range(length):
        words = chain.suffixes(prefix.key())
        if not words:
            logger.debug(f"No suffixes recorded for prefix {str(prefix)!r}, stopping.")
            return
        word = rng.choice(words)
        yield word
        prefix.shift(word)


def generate_sequence(chain, length=100, rng=None):
    return list(iter_sequence(chain, length=length, rng=rng))


def write_sequence(chain, out, length=100, rng=None):
    """
    Streams generated words to the text sink `out`, each followed by a space.

    Returns the number of words written. A failing write propagates
    immediately and ends the run.
    """
    count = 0
    for word in iter_sequence(chain, length=length, rng=rng):
        out.write(word + ' ')
        count += 1

    if count < length:
        logger.info(f"Generated {count} of {length} words before running out of suffixes.")
    else:
        logger.info(f"Generated {count} words (limit reached).")
    return count
