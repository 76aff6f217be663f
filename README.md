# petpatter

A small program for creating pets and patting them. There are two kinds of
pet, dogs and cats. Each has a name, an age and a colour. A patted pet
answers: a dog says `Woof!` and a cat says `Meow!`.

## Installation

```
pip install .
```

## Running it

```
petpatter
```

This reads commands from standard input, one per line, and writes feedback
to standard output. It keeps a dog form and a cat form, each filled in with a
default pet:

| Form | Name | Age | Colour | Create |
|------|------|-----|--------|--------|
| Dog  | Dog1 | 6   | Black  | on     |
| Cat  | Cat1 | 3   | White  | on     |

Commands:

| Command | Effect |
|---------|--------|
| `dog name <value>`, `dog age <value>`, `dog color <value>` | Set a field of the dog form (values are cut to 99 characters) |
| `cat name <value>`, `cat age <value>`, `cat color <value>` | Set a field of the cat form |
| `dog create on\|off`, `cat create on\|off` | Switch creation for that form on or off (`on`/`yes`/`true`/`1` or `off`/`no`/`false`/`0`) |
| `create` | Add one pet from each form that has creation switched on |
| `pat` | Pat every pet and print what each one says |
| `quit` | End the session |

Blank lines are ignored. The session also ends at the end of input or on
Ctrl-C. An unrecognised command prints `Unknown command: ...`, and a bad
field or switch value prints a line starting with `Error:`.

At most ten dogs and ten cats can be held. Creating one more than that
prints an error; a dog created in the same step before the error is kept.

Patting writes one line per pet, all cats first, then all dogs:

```
Cat1 says Meow!
Dog1 says Woof!
```

Before those lines, `No dogs to pat!` and/or `No cats to pat!` are printed
when there are none of that kind.

An age is read as the whole number at the start of the text (leading spaces
and a sign allowed); text that does not start with a number gives age 0.

## Using it from Python

```python
from petpatter.pets import Cat, Dog

print(Dog("Rex", 4, "Brown").pat())   # Rex says Woof!
print(Cat("Tom", 2, "Grey").pat())    # Tom says Meow!
```

`petpatter.app` provides:

- `PetForm(name, age, color, create=True)` – the fields of one form; `age`
  is text.
- `PetRegistry(capacity=10)` – holds created pets in `dogs` and `cats`.
  `create_pets(dog_form, cat_form)` creates pets from the forms whose
  `create` is true and returns them; it raises `CapacityError` when a kind is
  full. `pat_pets()` returns the feedback lines described above.
- `parse_age(text)` – reads an age as described above.
- `run_console(registry, lines, write)` – runs the commands above from any
  iterable of lines, passing each output line to `write`.
- `main(argv=None)` – the `petpatter` command.

## What it does not do

There is no graphical window: the forms are edited through text commands
only. Pets are held in memory and are lost when the session ends.

## Running the tests

```
pip install .[test]
pytest
```