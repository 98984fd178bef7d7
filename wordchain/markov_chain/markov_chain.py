from collections import defaultdict


class Prefix:
    """
    A sliding window over the most recent `order` words.

    A fresh prefix is filled with empty strings, so the first words of a
    text are keyed by placeholder slots rather than skipped.
    """
    def __init__(self, order=2):
        if order < 1:
            raise ValueError(f"Prefix order must be at least 1, got {order}")
        self.words = [''] * order

    def shift(self, word):
        # Drop the oldest word and append the new one, in place
        self.words[:-1] = self.words[1:]
        self.words[-1] = word

    def key(self):
        return tuple(self.words)

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __str__(self):
        return ' '.join(self.words)

    def __repr__(self):
        return f"Prefix({self.words!r})"


class Chain:
    """
    Maps prefixes of `order` words to every word observed right after them.

    Suffix lists keep duplicates in the order they were seen, so a word that
    followed a prefix three times takes three slots and is three times as
    likely to be picked during generation.
    """
    def __init__(self, order=2):
        if order < 1:
            raise ValueError(f"Chain order must be at least 1, got {order}")
        self.order = order
        self.model = defaultdict(list)

    def new_prefix(self):
        return Prefix(self.order)

    def add(self, key, word):
        self.model[key].append(word)

    def suffixes(self, key):
        """
        Returns the words recorded after `key`, or an empty tuple if none were.

        The stored list itself is returned, without copying, so callers must
        treat it as read-only.
        """
        # .get() so that lookups never insert an empty entry into the model
        return self.model.get(key, ())

    @property
    def token_count(self):
        return sum(len(words) for words in self.model.values())

    def keys(self):
        return self.model.keys()

    def items(self):
        return ((key, tuple(words)) for key, words in self.model.items())

    def __contains__(self, key):
        return key in self.model

    def __len__(self):
        return len(self.model)

    def __repr__(self):
        return f"Chain(order={self.order}, prefixes={len(self)}, tokens={self.token_count})"
