"""Map, filter, and reduce over finite sequences.

These shadow the builtins of the same names on purpose; import the
module and call them qualified:

>>> from hofs import sequences
>>> sequences.map([1, 2, 303, 304], lambda x: x + 1)
[2, 3, 304, 305]

All of them leave the input alone and return a new value.  If a
supplied function raises, the exception propagates right away and no
partial result is returned.
"""

__all__ = [
    'filter',
    'filter_by_reduce',
    'map',
    'map_by_reduce',
    'reduce',
]

import logging

from hofs.preconds import check_callable


LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())


def map(xs, f):  # pylint: disable=redefined-builtin
    """Return [f(x) for x in xs], evaluated left to right."""
    check_callable(f, 'f')
    result = []
    for i, x in enumerate(xs):
        try:
            result.append(f(x))
        except Exception:
            LOG.debug('map: %r fails at index %d', f, i)
            raise
    return result


def filter(xs, check):  # pylint: disable=redefined-builtin
    """Return elements of xs satisfying check, in their original order."""
    check_callable(check, 'check')
    result = []
    for i, x in enumerate(xs):
        try:
            if check(x):
                result.append(x)
        except Exception:
            LOG.debug('filter: %r fails at index %d', check, i)
            raise
    return result


def reduce(xs, initial, combine):
    """Fold xs from the left.

    Unlike ``functools.reduce``, the initial value is required and comes
    before the combiner; ``combine`` is called as ``combine(acc, x)``.

    >>> reduce(['The', 'quick', 'brown', 'fox'], '', lambda a, x: a + x)
    'Thequickbrownfox'
    """
    check_callable(combine, 'combine')
    acc = initial
    for i, x in enumerate(xs):
        try:
            acc = combine(acc, x)
        except Exception:
            LOG.debug('reduce: %r fails at index %d', combine, i)
            raise
    return acc


def map_by_reduce(xs, f):
    check_callable(f, 'f')
    return reduce(xs, [], lambda acc, x: acc + [f(x)])


def filter_by_reduce(xs, check):
    check_callable(check, 'check')
    return reduce(xs, [], lambda acc, x: acc + [x] if check(x) else acc)
