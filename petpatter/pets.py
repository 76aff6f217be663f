"""Pets that can be created and patted."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Pet:
    """A named pet that answers with its own sound when patted."""

    name: str
    age: int
    color: str

    sound: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not type(self).sound:
            raise TypeError(f"{type(self).__name__} has no sound; use Cat or Dog")

    def pat(self) -> str:
        """Return the pet's response to being patted."""
        return f"{self.name} says {self.sound}!"


@dataclass
class Cat(Pet):
    """A cat; it meows."""

    sound: ClassVar[str] = "Meow"


@dataclass
class Dog(Pet):
    """A dog; it woofs."""

    sound: ClassVar[str] = "Woof"