from .markov_chain import Chain, Prefix
from .train import build_chain, tokenize, train_chain
from .generate import (
    default_rng,
    generate_sequence,
    iter_sequence,
    make_rng,
    write_sequence,
)

__all__ = [
    'Chain',
    'Prefix',
    'build_chain',
    'default_rng',
    'generate_sequence',
    'iter_sequence',
    'make_rng',
    'tokenize',
    'train_chain',
    'write_sequence',
]
