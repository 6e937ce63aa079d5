import pytest
from behavioral.interpreter.hit_interpreter import HitKind, HitPower, HitSequence, interpret

FIGHT = [HitKind.HARD, HitKind.HARD, HitKind.SOFT, HitKind.HARD, HitKind.SOFT]


@pytest.mark.unit
def test_single_hit_forward_and_undo():
    damage = HitPower()
    interpret(HitKind.HARD, damage, echo=lambda s: None)
    assert damage.number == 10
    interpret(HitKind.SOFT, damage, undo=True, echo=lambda s: None)
    assert damage.number == 8


@pytest.mark.unit
def test_label_does_not_depend_on_undo():
    out = []
    interpret(HitKind.SOFT, HitPower(), echo=out.append)
    interpret(HitKind.SOFT, HitPower(), undo=True, echo=out.append)
    assert out == ["Soft Hit x2", "Soft Hit x2"]


@pytest.mark.unit
def test_forward_pass_totals_34_and_3400_displayed():
    damage = HitPower()
    HitSequence(FIGHT).interpret(damage, echo=lambda s: None)
    assert damage.number == 34
    assert damage.number * 100 == 3400


@pytest.mark.unit
def test_reversed_undo_restores_accumulator():
    damage = HitPower(number=7)
    hits = HitSequence(FIGHT)
    hits.interpret(damage, echo=lambda s: None)
    hits.reversed().interpret(damage, undo=True, echo=lambda s: None)
    assert damage.number == 7


@pytest.mark.unit
def test_reversed_is_a_new_sequence_in_reverse_order():
    hits = HitSequence(FIGHT)
    rev = hits.reversed()
    assert list(rev) == list(reversed(FIGHT))
    assert list(hits) == FIGHT
    assert len(rev) == 5


@pytest.mark.unit
def test_labels_printed_in_sequence_order(capsys):
    HitSequence([HitKind.SOFT, HitKind.HARD]).reversed().interpret(HitPower(), undo=True)
    assert capsys.readouterr().out.splitlines() == ["Hard Hit x10", "Soft Hit x2"]


@pytest.mark.unit
def test_empty_sequence_leaves_damage_untouched():
    damage = HitSequence().interpret(HitPower(number=3))
    assert damage.number == 3
