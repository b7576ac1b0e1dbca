"""Higher-order functions over sequences and functions.

The sequence primitives (map, filter, reduce) are in ``hofs.sequences``
and the function combinators (compose, curry) are in
``hofs.functionals``.
"""
