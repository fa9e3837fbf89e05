from typing import Callable, Any
from functools import reduce


def compose(*funcs: Callable) -> Callable:
    """
    Compose multiple functions into a single function, applied right to left.
    """
    if not funcs:
        return lambda x: x

    def composed(*args, **kwargs):
        result = funcs[-1](*args, **kwargs)
        for f in reversed(funcs[:-1]):
            result = f(result)
        return result

    return composed


def pipe(value: Any, *funcs: Callable) -> Any:
    """
    Pipe a value through a series of functions, left to right.
    """
    return reduce(lambda acc, f: f(acc), funcs, value)
