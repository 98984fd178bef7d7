import logging

from tqdm import tqdm

from .markov_chain import Chain

logger = logging.getLogger(__name__)


def tokenize(stream):
    """Lazily yield whitespace-delimited words from an iterable of lines."""
    for line in stream:
        yield from line.split()


def train_chain(chain, stream, progress=False):
    """
    Feeds every word of `stream` into `chain`, keyed by the words before it.

    The stream is consumed until it is exhausted. Read errors are not caught
    here; they abort the build and reach the caller as-is.
    """
    prefix = chain.new_prefix()
    words = tokenize(stream)
    if progress:
        words = tqdm(words, desc="Building chain", unit="word", leave=False)

    count = 0
    for word in words:
        chain.add(prefix.key(), word)
        prefix.shift(word)
        count += 1

    logger.info(f"Read {count} words into {len(chain)} prefixes (order {chain.order}).")
    return chain


def build_chain(stream, order=2, progress=False):
    return train_chain(Chain(order=order), stream, progress=progress)
