from typing import Generic, TypeVar, Callable, Optional
from dataclasses import dataclass

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Maybe(Generic[T]):
    """A lookup result: Just(value) when found, Nothing() otherwise"""

    def filter(self, predicate: Callable[[T], bool]) -> 'Maybe[T]':
        raise NotImplementedError

    def get_or_else(self, default: Optional[T]) -> Optional[T]:
        raise NotImplementedError


@dataclass(frozen=True)
class Just(Maybe[T]):
    value: T

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self if predicate(self.value) else Nothing()

    def get_or_else(self, default: Optional[T]) -> Optional[T]:
        return self.value


class Nothing(Maybe[T]):

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self

    def get_or_else(self, default: Optional[T]) -> Optional[T]:
        return default

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(Nothing)


def maybe(value: Optional[T]) -> Maybe[T]:
    if value is None:
        return Nothing()
    return Just(value)


class Either(Generic[E, T]):
    """A rule check: Right(value) when it passed, Left(reason) when it did not"""

    def bind(self, func: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        raise NotImplementedError

    def is_right(self) -> bool:
        raise NotImplementedError

    def is_left(self) -> bool:
        return not self.is_right()


@dataclass(frozen=True)
class Right(Either[E, T]):
    value: T

    def bind(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return func(self.value)

    def is_right(self) -> bool:
        return True


@dataclass(frozen=True)
class Left(Either[E, T]):
    error: E

    def bind(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return self

    def is_right(self) -> bool:
        return False
