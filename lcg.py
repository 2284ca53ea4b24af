# lcg.py

import constants as C

class LinearCongruentialGenerator:
    """
    Seeded pseudo-random integer stream used to generate plant structures.
    The same seed always yields the same sequence, which is what makes a plant's
    shape reproducible from its identity alone.
    """
    def __init__(self, seed):
        self.state = (seed + 1) & C.LCG_MASK_64

    def next(self):
        """Advances the state and returns an integer in [0, 32768)."""
        self.state = (self.state * C.LCG_MULTIPLIER + C.LCG_INCREMENT) & C.LCG_MASK_64
        return (self.state // C.LCG_OUTPUT_DIVISOR) % C.LCG_OUTPUT_MODULUS

    def next_below(self, bound):
        """Returns next() % bound."""
        return self.next() % bound

    def one_in(self, odds):
        """True when the next draw is divisible by `odds`."""
        return self.next() % odds == 0

    def sign(self):
        """Returns -1 on an even draw, +1 otherwise."""
        return -1 if self.next() % 2 == 0 else 1
