__all__ = [
    'IllegalArgumentException',
    'check_argument',
    'check_callable',
]


class IllegalArgumentException(Exception):
    pass


def check_argument(cond, message=None, *message_args):
    if not cond:
        if message is None:
            raise IllegalArgumentException
        else:
            raise IllegalArgumentException(message % message_args)


def check_callable(func, name):
    """Return func if it is callable, and raise otherwise."""
    check_argument(callable(func), 'expect callable %s, not %r', name, func)
    return func
