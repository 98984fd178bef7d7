"""
Command-line entry point: builds a Markov chain from text on standard input
(or a file) and prints a random walk through it to standard output.
"""
import logging
import sys

import click

from . import config
from .markov_chain import build_chain, make_rng, write_sequence

logger = logging.getLogger(__name__)


def setup_logging(verbose=0):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = config.LOG_LEVEL
    # force=True so repeated invocations in one process pick up the current stderr
    logging.basicConfig(level=level, format=config.LOG_FORMAT, stream=sys.stderr, force=True)


@click.command()
@click.option('--words', '-w', type=click.IntRange(min=1), default=config.DEFAULT_WORDS, show_default=True,
              help="Maximum number of words to print.")
@click.option('--prefix', '-p', type=click.IntRange(min=1), default=config.DEFAULT_PREFIX, show_default=True,
              help="Prefix length in words.")
@click.option('--seed', type=int, default=None,
              help="Seed for the random source. Defaults to a time-based seed.")
@click.option('--input', '-i', 'input_file', type=click.File('r', encoding='utf-8'), default='-',
              help="Text file to build the chain from (reads standard input if not set).")
@click.option('--progress', is_flag=True, help="Show a progress bar while reading the input.")
@click.option('--verbose', '-v', count=True, help="Log more detail to stderr (repeat for debug output).")
def main(words: int, prefix: int, seed, input_file, progress: bool, verbose: int):
    """
    Generates random text from a Markov chain built over the input's words.
    """
    setup_logging(verbose)
    rng = make_rng(seed)

    try:
        chain = build_chain(input_file, order=prefix, progress=progress)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read input: {e}")
        sys.exit(1)

    out = sys.stdout
    try:
        write_sequence(chain, out, length=words, rng=rng)
        out.write('\n')
        out.flush()
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
