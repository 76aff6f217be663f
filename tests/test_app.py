import pytest

from petpatter.app import (
    CAPACITY,
    DEFAULT_CAT_FORM,
    DEFAULT_DOG_FORM,
    NO_CATS,
    NO_DOGS,
    CapacityError,
    PetForm,
    PetRegistry,
    main,
    parse_age,
    run_console,
)
from petpatter.pets import Cat, Dog


@pytest.mark.parametrize(
    "text, expected",
    [("6", 6), ("  42", 42), ("7years", 7), ("-3", -3), ("", 0), ("abc", 0)],
)
def test_parse_age(text, expected):
    assert parse_age(text) == expected


def test_empty_registry_pat():
    assert PetRegistry().pat_pets() == [NO_DOGS, NO_CATS]


def test_create_both_defaults():
    registry = PetRegistry()
    created = registry.create_pets(DEFAULT_DOG_FORM, DEFAULT_CAT_FORM)
    assert [type(p) for p in created] == [Dog, Cat]
    assert registry.dogs[0].age == 6
    assert registry.cats[0].age == 3
    assert registry.pat_pets() == ["Cat1 says Meow!", "Dog1 says Woof!"]


def test_unticked_form_is_skipped():
    registry = PetRegistry()
    off = PetForm("Cat1", "3", "White", create=False)
    registry.create_pets(DEFAULT_DOG_FORM, off)
    assert len(registry.cats) == 0
    assert registry.pat_pets()[0] == NO_CATS


def test_cats_patted_before_dogs():
    registry = PetRegistry()
    registry.create_pets(PetForm("A", "1", "x"), PetForm("B", "1", "y"))
    registry.create_pets(PetForm("C", "1", "x"), PetForm("D", "1", "y"))
    feedback = registry.pat_pets()
    assert [line.split()[0] for line in feedback] == ["B", "D", "A", "C"]


def test_capacity_limit():
    registry = PetRegistry()
    for _ in range(CAPACITY):
        registry.create_pets(DEFAULT_DOG_FORM, DEFAULT_CAT_FORM)
    with pytest.raises(CapacityError):
        registry.create_pets(DEFAULT_DOG_FORM, DEFAULT_CAT_FORM)
    assert len(registry.dogs) == CAPACITY


def _run(lines):
    registry = PetRegistry()
    output = []
    run_console(registry, lines, output.append)
    return registry, output


def test_console_create_and_pat():
    registry, output = _run(["create", "pat"])
    assert output == ["Cat1 says Meow!", "Dog1 says Woof!"]
    assert len(registry.dogs) == 1


def test_console_edit_fields():
    registry, output = _run(["dog name Rex Jr", "dog age 9", "cat create off", "create"])
    assert registry.dogs[0].name == "Rex Jr"
    assert registry.dogs[0].age == 9
    assert registry.cats == []
    assert output == []


def test_console_quit_stops():
    registry, _ = _run(["quit", "create"])
    assert registry.dogs == []


def test_console_reports_bad_input():
    _, output = _run(["jump", "dog create maybe", "dog size big"])
    assert len(output) == 3
    assert all(line.startswith(("Unknown command", "Error")) for line in output)


def test_console_reports_capacity():
    _, output = _run(["create"] * (CAPACITY + 1))
    assert len(output) == 1
    assert output[0].startswith("Error")


def test_main_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("pat\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [NO_DOGS, NO_CATS]