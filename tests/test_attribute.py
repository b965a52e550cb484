import uuid

import pytest

from craftclient.attribute import Attribute, Modifier, ModifierOperation


def _mod(amount, operation):
    return Modifier(uuid.uuid4(), amount, operation)


def test_no_modifiers_returns_base_amount():
    attribute = Attribute("generic.maxHealth", 20.0)
    assert attribute.get_amount() == 20.0
    assert attribute.modifiers == []


def test_worked_example_applies_in_order():
    attribute = Attribute("generic.attackDamage", 10.0)
    attribute.add_modifier(_mod(1.0, ModifierOperation.MULTIPLY_PERCENT))
    attribute.add_modifier(_mod(0.5, ModifierOperation.ADD_PERCENT))
    attribute.add_modifier(_mod(2.0, ModifierOperation.ADD))
    attribute.add_modifier(_mod(3.0, ModifierOperation.ADD))
    assert attribute.get_amount() == pytest.approx(45.0)


def test_percentages_use_added_value_not_compounded():
    attribute = Attribute("generic.movementSpeed", 10.0)
    attribute.add_modifier(_mod(0.5, ModifierOperation.ADD_PERCENT))
    attribute.add_modifier(_mod(0.5, ModifierOperation.ADD_PERCENT))
    assert attribute.get_amount() == pytest.approx(20.0)


def test_order_of_modifiers_does_not_matter():
    mods = [
        _mod(4.0, ModifierOperation.ADD),
        _mod(0.25, ModifierOperation.ADD_PERCENT),
        _mod(0.1, ModifierOperation.MULTIPLY_PERCENT),
        _mod(-1.0, ModifierOperation.ADD),
    ]
    forward = Attribute("k", 7.0)
    backward = Attribute("k", 7.0)
    for m in mods:
        forward.add_modifier(m)
    for m in reversed(mods):
        backward.add_modifier(m)
    assert forward.get_amount() == pytest.approx(backward.get_amount())


def test_zero_modifiers_leave_value_unchanged():
    attribute = Attribute("k", 3.5)
    attribute.add_modifier(_mod(0.0, ModifierOperation.ADD))
    attribute.add_modifier(_mod(0.0, ModifierOperation.ADD_PERCENT))
    attribute.add_modifier(_mod(0.0, ModifierOperation.MULTIPLY_PERCENT))
    assert attribute.get_amount() == pytest.approx(3.5)


def test_multiply_by_minus_one_zeroes_value():
    attribute = Attribute("k", 12.0)
    attribute.add_modifier(_mod(-1.0, ModifierOperation.MULTIPLY_PERCENT))
    assert attribute.get_amount() == pytest.approx(0.0)


def test_get_amount_does_not_change_base():
    attribute = Attribute("k", 5.0)
    attribute.add_modifier(_mod(2.0, ModifierOperation.ADD))
    attribute.get_amount()
    assert attribute.base_amount == 5.0


def test_copy_is_independent():
    attribute = Attribute("k", 1.0)
    clone = attribute.copy()
    clone.add_modifier(_mod(1.0, ModifierOperation.ADD))
    assert attribute.modifiers == []
    assert len(clone.modifiers) == 1