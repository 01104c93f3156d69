"""Exceptions raised by the Markov chain estimators."""


class MarkovError(Exception):
    pass


class InvalidStateError(MarkovError, ValueError):
    """State cannot be placed on the grid, or two states are not connected."""


class InvalidDirectionError(MarkovError, ValueError):
    pass


class UndefinedTransitionError(MarkovError, ValueError):
    """Pair of states outside the 3-state rate table."""
