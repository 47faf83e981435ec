import pytest


class SequenceRandom:
    """Deterministic stand-in for random.random.

    Returns the given values in order, then keeps repeating the last one.
    Counts calls so tests can check how many draws were made.
    """

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


def _no_draws():
    raise AssertionError("random source should not be called")


@pytest.fixture
def seq_rand():
    return SequenceRandom


@pytest.fixture
def no_draws():
    return _no_draws
