from typing import List, Tuple

import vyantra.runtime.faults as f


class OperandStack():
    """
    Integer operand stack. Slot 0 is the bottom, the last slot is the top.

    With a capacity of None the stack is unbounded and never overflows.
    """

    items: List[int]
    capacity: int | None

    def __init__(self, capacity: int | None = None):
        if capacity is not None and capacity < 0:
            raise ValueError(f'Stack capacity must not be negative, got {capacity}')

        self.items = []
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self.items)

    @property
    def depth(self) -> int:
        return len(self.items)

    def values(self) -> Tuple[int, ...]:
        return tuple(self.items)

    def require(self, count: int):
        if len(self.items) < count:
            raise f.StackUnderflow(
                f'Need {count} value(s), stack holds {len(self.items)}'
            )

    def require_room(self):
        if self.capacity is not None and len(self.items) >= self.capacity:
            raise f.StackOverflow(f'Stack capacity {self.capacity} exceeded')

    def push(self, val: int):
        self.require_room()
        self.items.append(val)

    def pop(self) -> int:
        self.require(1)
        return self.items.pop()

    def check_index(self, index: int):
        if index < 0 or index >= len(self.items):
            raise f.InvalidStackAddress(
                f'Slot {index} outside stack of depth {len(self.items)}'
            )

    def peek_at(self, index: int) -> int:
        self.check_index(index)
        return self.items[index]

    def write_at(self, index: int, val: int):
        self.check_index(index)
        self.items[index] = val

    def index_from_top(self, depth: int) -> int:
        return len(self.items) - 1 - depth
