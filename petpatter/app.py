"""Pet registry and a line-driven console front end for it."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Sequence

from petpatter.pets import Cat, Dog, Pet

CAPACITY = 10
MAX_INPUT_LENGTH = 99

NO_DOGS = "No dogs to pat!"
NO_CATS = "No cats to pat!"

_AGE_PATTERN = re.compile(r"\s*([+-]?\d+)")
_TRUE_WORDS = frozenset({"on", "yes", "true", "1"})
_FALSE_WORDS = frozenset({"off", "no", "false", "0"})


class CapacityError(Exception):
    """Raised when a registry has no room left for another pet."""


def parse_age(text: str) -> int:
    """Read a leading integer from text, as atoi does; 0 if there is none."""
    match = _AGE_PATTERN.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class PetForm:
    """The entry fields for one kind of pet."""

    name: str
    age: str
    color: str
    create: bool = True


DEFAULT_DOG_FORM = PetForm(name="Dog1", age="6", color="Black")
DEFAULT_CAT_FORM = PetForm(name="Cat1", age="3", color="White")


@dataclass
class PetRegistry:
    """Holds created dogs and cats, each kind up to a fixed capacity."""

    capacity: int = CAPACITY
    dogs: list[Dog] = field(default_factory=list)
    cats: list[Cat] = field(default_factory=list)

    def _store(self, pets: list, pet: Pet) -> None:
        if len(pets) >= self.capacity:
            kind = type(pet).__name__.lower()
            raise CapacityError(f"no room for another {kind} (capacity {self.capacity})")
        pets.append(pet)

    def create_pets(self, dog_form: PetForm, cat_form: PetForm) -> list[Pet]:
        """Create a dog and/or a cat from the forms that are ticked; return them."""
        created: list[Pet] = []
        if dog_form.create:
            dog = Dog(dog_form.name, parse_age(dog_form.age), dog_form.color)
            self._store(self.dogs, dog)
            created.append(dog)
        if cat_form.create:
            cat = Cat(cat_form.name, parse_age(cat_form.age), cat_form.color)
            self._store(self.cats, cat)
            created.append(cat)
        return created

    def pat_pets(self) -> list[str]:
        """Pat every pet, cats first, and return the feedback lines."""
        feedback: list[str] = []
        if not self.dogs:
            feedback.append(NO_DOGS)
        if not self.cats:
            feedback.append(NO_CATS)
        feedback.extend(cat.pat() for cat in self.cats)
        feedback.extend(dog.pat() for dog in self.dogs)
        return feedback


def _parse_switch(word: str) -> bool:
    lowered = word.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f"expected on or off, got {word!r}")


def _edit_form(form: PetForm, field_name: str, value: str) -> PetForm:
    if field_name == "create":
        return replace(form, create=_parse_switch(value))
    if field_name in ("name", "age", "color"):
        return replace(form, **{field_name: value[:MAX_INPUT_LENGTH]})
    raise ValueError(f"unknown field {field_name!r}")


def run_console(
    registry: PetRegistry, lines: Iterable[str], write: Callable[[str], object]
) -> None:
    """Drive the registry from command lines, writing feedback through write.

    Commands: ``dog|cat name|age|color <value>``, ``dog|cat create on|off``,
    ``create``, ``pat`` and ``quit``.
    """
    forms = {"dog": DEFAULT_DOG_FORM, "cat": DEFAULT_CAT_FORM}
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        words = line.split(maxsplit=2)
        command = words[0].lower()
        if command == "quit":
            return
        if command == "create":
            try:
                registry.create_pets(forms["dog"], forms["cat"])
            except CapacityError as exc:
                write(f"Error: {exc}")
        elif command == "pat":
            for message in registry.pat_pets():
                write(message)
        elif command in forms:
            if len(words) < 2:
                write(f"Error: missing field after {command!r}")
                continue
            value = words[2] if len(words) > 2 else ""
            try:
                forms[command] = _edit_form(forms[command], words[1].lower(), value)
            except ValueError as exc:
                write(f"Error: {exc}")
        else:
            write(f"Unknown command: {line}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pet console on standard input."""
    parser = argparse.ArgumentParser(
        prog="petpatter",
        description="Create dogs and cats and pat them.",
    )
    parser.parse_args(argv)
    registry = PetRegistry()
    try:
        run_console(registry, sys.stdin, print)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())