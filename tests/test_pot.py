import pytest

from riskwar.common.pot import Pot


def test_pot_starts_empty():
    assert Pot().value == 0


def test_pot_add_cash():
    pot = Pot()
    pot.add_cash(10)
    pot.add_cash(15)
    assert pot.value == 25


def test_pot_rejects_negative_amount():
    pot = Pot()
    with pytest.raises(ValueError):
        pot.add_cash(-1)
    assert pot.value == 0


def test_pot_clear():
    pot = Pot()
    pot.add_cash(30)
    pot.clear()
    assert pot.value == 0


@pytest.mark.parametrize("start, expected", [(20, 10), (21, 10), (1, 0), (0, 0)])
def test_pot_halve_rounds_down(start, expected):
    pot = Pot()
    pot.add_cash(start)
    pot.halve()
    assert pot.value == expected


def test_pot_double():
    pot = Pot()
    pot.add_cash(21)
    pot.double()
    assert pot.value == 42
