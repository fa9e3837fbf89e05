from dataclasses import dataclass, field
from typing import List


@dataclass(eq=False)
class User:
    # compared and hashed by identity, so a renamed user keeps its purchases
    username: str
    password: str
    email: str


@dataclass
class Book:
    title: str
    author: str
    genre: str
    price: float
    reviews: List[str] = field(default_factory=list, compare=False, repr=False)
