import dataclasses

import pytest
from creational.prototype.character_prototype import Character, CharacterKind, clone, describe, \
    default_roster, list_characters


@pytest.mark.unit
def test_clone_with_new_name_leaves_template_untouched():
    brick = Character(CharacterKind.BERSERKER, "Brick", "Human", "Breast Plate")
    mordecai = clone(brick, name="Mordecai")
    assert brick.name == "Brick"
    assert mordecai.name == "Mordecai"
    assert mordecai.race == "Human"


@pytest.mark.unit
def test_clone_without_overrides_is_equal_but_distinct():
    lilith = Character(CharacterKind.SIREN, "Lilith", "Siren", "Shield", 120)
    copy = clone(lilith)
    assert copy == lilith and copy is not lilith


@pytest.mark.unit
def test_characters_are_immutable():
    brick = Character(CharacterKind.BERSERKER, "Brick", "Human", "Breast Plate")
    with pytest.raises(dataclasses.FrozenInstanceError):
        brick.name = "Mordecai"


@pytest.mark.unit
def test_describe_depends_on_kind():
    berserker = Character(CharacterKind.BERSERKER, "Brick", "Human", "Breast Plate", 50)
    siren = Character(CharacterKind.SIREN, "Lilith", "Siren", "Shield", 120)
    assert describe(berserker) == "Brick - Human - Breast Plate"
    assert describe(siren) == "Lilith - Siren - Shield - 120 Health Per Min"


@pytest.mark.unit
def test_default_roster_lines():
    assert list_characters(default_roster()) == [
        "Brick - Human - Breast Plate",
        "Mordecai - Human - Chainmail",
        "Lilith - Siren - Shield - 120 Health Per Min",
        "Natasha - Super Siren - Shield - 120 Health Per Min",
    ]
