"""Function combinators.

``compose`` builds pipelines in call order, which is the reverse of the
mathematical notation: ``compose(f, g)`` is ``g . f``.  Composers also
support ``>>`` so that pipelines read left to right:

>>> double = lambda x: x * 2
>>> add_ten = lambda x: x + 10
>>> compose(double, add_ten)(1)
12
>>> (compose(double, add_ten) >> str)(1)
'12'

Note that ``compose(f)`` returns ``f`` itself, which does not support
``>>`` unless ``f`` is a composer.
"""

__all__ = [
    'Composer',
    'compose',
    'curry',
    'identity',
]

import functools

from hofs.preconds import check_argument
from hofs.preconds import check_callable


def identity(x):
    return x


def compose(*funcs):
    """Return a function as the composition of functions.

    >>> compose(lambda i: i + 1, str)(0)
    '1'
    """
    for i, func in enumerate(funcs):
        check_callable(func, 'funcs[%d]' % i)
    if not funcs:
        return identity
    elif len(funcs) == 1:
        return funcs[0]
    else:
        return Composer(funcs)


class Composer:
    """Call functions in order, feeding each result to the next one.

    Nested composers are flattened on construction, and so composition
    is associative not just by result but by structure, too.
    """

    def __init__(self, funcs):
        flattened = []
        for func in funcs:
            if isinstance(func, Composer):
                flattened.extend(func.funcs)
            else:
                flattened.append(func)
        check_argument(flattened, 'expect at least one function')
        for i, func in enumerate(flattened):
            check_callable(func, 'funcs[%d]' % i)
        self.funcs = tuple(flattened)

    def __repr__(self):
        return '<%s at %#x of: %s>' % (
            self.__class__.__qualname__,
            id(self),
            ', '.join(
                getattr(func, '__name__', None) or repr(func)
                for func in self.funcs
            ),
        )

    def __eq__(self, other):
        if not isinstance(other, Composer):
            return NotImplemented
        return self.funcs == other.funcs

    def __hash__(self):
        return hash(self.funcs)

    def __rshift__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __rrshift__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(other, self)

    def __call__(self, *args, **kwargs):
        first, *rest = self.funcs
        x = first(*args, **kwargs)
        for func in rest:
            x = func(x)
        return x


def curry(func):
    """Turn a two-argument function into a chain of one-argument ones.

    The first argument is fixed first; the result is reusable:

    >>> order_total = lambda unit_price, quantity: unit_price * quantity
    >>> ticket_calculator = curry(order_total)(12)
    >>> ticket_calculator(10)
    120
    """
    check_callable(func, 'func')

    @functools.wraps(func, updated=())
    def curried(x):
        return functools.partial(func, x)

    # curried takes only the first argument of func.
    del curried.__wrapped__

    return curried
