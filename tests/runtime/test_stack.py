import pytest

import vyantra.runtime.faults as f
from vyantra.runtime.stack import OperandStack


def test_push_pop_order():
    stack = OperandStack()
    stack.push(1)
    stack.push(2)
    stack.push(3)

    assert stack.values() == (1, 2, 3)
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.depth == 1


def test_pop_empty_underflows():
    with pytest.raises(f.StackUnderflow):
        OperandStack().pop()


def test_require():
    stack = OperandStack()
    stack.push(1)

    stack.require(1)

    with pytest.raises(f.StackUnderflow):
        stack.require(2)


def test_capacity_overflows():
    stack = OperandStack(capacity=2)
    stack.push(1)
    stack.push(2)

    with pytest.raises(f.StackOverflow):
        stack.push(3)

    assert stack.values() == (1, 2)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        OperandStack(capacity=-1)


def test_peek_and_write_at():
    stack = OperandStack()
    stack.push(10)
    stack.push(20)

    assert stack.peek_at(0) == 10
    stack.write_at(1, 99)
    assert stack.values() == (10, 99)
    assert len(stack) == 2


@pytest.mark.parametrize('index', [-1, 2, 100])
def test_out_of_bounds_slot(index):
    stack = OperandStack()
    stack.push(10)
    stack.push(20)

    with pytest.raises(f.InvalidStackAddress):
        stack.peek_at(index)

    with pytest.raises(f.InvalidStackAddress):
        stack.write_at(index, 0)

    assert stack.values() == (10, 20)


def test_values_is_a_snapshot():
    stack = OperandStack()
    stack.push(1)
    snapshot = stack.values()
    stack.push(2)

    assert snapshot == (1,)
