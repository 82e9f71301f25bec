import pytest


class FixedRng:
    """Stand-in RNG that always picks the same catalog entry."""

    def __init__(self, index: int) -> None:
        self.index = index

    def randrange(self, _n: int) -> int:
        return self.index


@pytest.fixture
def fixed_rng():
    """Return a factory for RNGs pinned to one catalog index."""

    return FixedRng
