"""
Unit tests for the ordered list engine (drag-style reorder)
"""

from itertools import permutations, product

import pytest

from engine.ordered_list import is_permutation, reorder
from models.enums import ComponentType

BLOCKS = ("email", "sms", "social", "passkey", "external")


def test_reorder_scenario():
    """sms dropped on passkey: sms takes the passkey slot, passkey shifts up"""
    assert reorder(BLOCKS, "sms", "passkey") == ("email", "social", "passkey", "sms", "external")
    print('✓ test_reorder_scenario')


def test_reorder_moving_up():
    assert reorder(BLOCKS, "passkey", "sms") == ("email", "passkey", "sms", "social", "external")


def test_reorder_to_ends():
    assert reorder(BLOCKS, "email", "external") == ("sms", "social", "passkey", "external", "email")
    assert reorder(BLOCKS, "external", "email") == ("external", "email", "sms", "social", "passkey")


def test_reorder_adjacent_is_a_move():
    assert reorder(BLOCKS, "email", "sms") == ("sms", "email", "social", "passkey", "external")
    assert reorder(BLOCKS, "sms", "email") == ("sms", "email", "social", "passkey", "external")


@pytest.mark.parametrize("source, target", [
    ("sms", "sms"),
    ("unknown", "sms"),
    ("sms", "unknown"),
    ("unknown", "other"),
    (None, "sms"),
])
def test_reorder_no_op(source, target):
    assert reorder(BLOCKS, source, target) == BLOCKS


def test_reorder_does_not_mutate_input():
    order = list(BLOCKS)
    result = reorder(order, "sms", "passkey")

    assert order == list(BLOCKS)
    assert isinstance(result, tuple)


def test_reorder_component_types():
    order = tuple(ComponentType)
    result = reorder(order, ComponentType.SMS, ComponentType.PASSKEY)

    assert result == (
        ComponentType.EMAIL,
        ComponentType.SOCIAL,
        ComponentType.PASSKEY,
        ComponentType.SMS,
        ComponentType.EXTERNAL,
    )


def test_permutation_invariant_all_orders():
    """Every order, every id pair: result is a permutation with a single relocation"""
    checked = 0
    for order in permutations(BLOCKS):
        for source, target in product(BLOCKS, BLOCKS):
            result = reorder(order, source, target)

            assert len(result) == len(order)
            assert is_permutation(result, BLOCKS)

            # All other blocks keep their relative order
            assert [b for b in result if b != source] == [b for b in order if b != source]

            if source == target:
                assert result == order
            else:
                assert result.index(source) == order.index(target)
            checked += 1

    print(f'✓ test_permutation_invariant_all_orders ({checked} moves)')


def test_is_permutation():
    assert is_permutation(BLOCKS, BLOCKS)
    assert is_permutation(tuple(reversed(BLOCKS)), BLOCKS)
    assert not is_permutation(BLOCKS[:-1], BLOCKS)
    assert not is_permutation(("email", "email", "social", "passkey", "external"), BLOCKS)
    assert not is_permutation(("email", "sms", "social", "passkey", "wallet"), BLOCKS)


def test_reorder_keeps_input_members():
    """Plain string ids still yield the sequence's own members"""
    result = reorder(tuple(ComponentType), "sms", "passkey")

    assert result == (
        ComponentType.EMAIL,
        ComponentType.SOCIAL,
        ComponentType.PASSKEY,
        ComponentType.SMS,
        ComponentType.EXTERNAL,
    )
    assert all(type(block) is ComponentType for block in result)
