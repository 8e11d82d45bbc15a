import vyantra.common.paths as p
from vyantra.runtime.regbank import RegisterBank
from vyantra.runtime.stack import OperandStack
import vyantra.runtime.faults as f


def slot_index(locator: p.Locator, stack: OperandStack) -> int:
    match locator:
        case p.Absolute(index=index):
            return index
        case p.FromTop(depth=depth):
            return stack.index_from_top(depth)
        case _:
            raise f.InvalidStackAddress(f'Locator {locator} has no fixed slot')


def read(path: p.Path, bank: RegisterBank, stack: OperandStack) -> int:
    match path:
        case p.Register(reg=reg):
            return bank.get(reg)
        case p.StackSlot(locator=locator):
            return stack.peek_at(slot_index(locator, stack))
        case _:
            raise TypeError(f'Unsupported path {path!r}')


def write(path: p.Path, val: int, bank: RegisterBank, stack: OperandStack):
    match path:
        case p.Register(reg=reg):
            bank.set(reg, val)
        case p.StackSlot(locator=p.PushTarget()):
            stack.push(val)
        case p.StackSlot(locator=locator):
            stack.write_at(slot_index(locator, stack), val)
        case _:
            raise TypeError(f'Unsupported path {path!r}')


def copy(src: p.Path, dst: p.Path, bank: RegisterBank, stack: OperandStack):
    # Nothing is written unless the read succeeds
    val = read(src, bank, stack)
    write(dst, val, bank, stack)
