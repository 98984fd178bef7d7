from .markov_chain import Chain, Prefix, build_chain, generate_sequence, write_sequence

__version__ = '0.1.0'
