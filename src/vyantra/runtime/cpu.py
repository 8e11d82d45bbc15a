import logging as lg
from dataclasses import dataclass
from typing import Callable, ClassVar, Mapping, Tuple

from vyantra.common.hwconf import INT32_MIN, INT32_MAX, DEFAULT_STACK_CAPACITY
import vyantra.common.ops as ops
import vyantra.common.registers as regs
import vyantra.runtime.addressing as addr
import vyantra.runtime.faults as f
from vyantra.runtime.regbank import RegisterBank
from vyantra.runtime.stack import OperandStack


class Halt(Exception):
    pass


# - Execution states - #

class ExecutionState:
    terminal: ClassVar[bool] = False


@dataclass(frozen=True)
class Running(ExecutionState):
    def __str__(self) -> str:
        return 'Running'


@dataclass(frozen=True)
class Halted(ExecutionState):
    terminal = True

    def __str__(self) -> str:
        return 'Halted'


@dataclass(frozen=True)
class Faulted(ExecutionState):
    terminal = True
    fault: f.Fault

    def __str__(self) -> str:
        return f'Faulted({self.fault})'


RUNNING = Running()
HALTED = Halted()


def check_int32(val: int) -> int:
    if val < INT32_MIN or val > INT32_MAX:
        raise f.ArithmeticOverflow(f'Result {val} does not fit in 32 bits')

    return val


def div_trunc(a: int, b: int) -> int:
    if b == 0:
        raise f.DivisionByZero(f'{a} / 0')

    # Python's // floors, the machine truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class CPU():
    """
    Stack-and-register machine over signed 32-bit integers.

    The program is fixed at construction. Each step executes the instruction
    under the instruction pointer. A failing instruction leaves the stack,
    the registers and the pointer exactly as they were before it ran, and the
    machine ends up Faulted. HLT ends it up Halted.
    """

    ip: int         # Instruction pointer
    next_ip: int    # Set by the handler being executed
    steps: int      # Steps taken, including the one that ended execution
    state: ExecutionState

    def __init__(
        self, program: ops.Program, stack_capacity: int | None = DEFAULT_STACK_CAPACITY
    ):
        self.program: Tuple[ops.Instruction, ...] = tuple(program)

        for index, inst in enumerate(self.program):
            if type(inst) not in self.HANDLERS:
                raise TypeError(f'Unsupported instruction {inst!r} at {index}')

        self.opstack = OperandStack(stack_capacity)
        self.bank = RegisterBank()

        self.ip = 0
        self.next_ip = 0
        self.steps = 0
        self.state = RUNNING

    # - Inspection - #

    @property
    def registers(self) -> Mapping[regs.Register, int]:
        return self.bank.values()

    @property
    def stack(self) -> Tuple[int, ...]:
        return self.opstack.values()

    @property
    def top(self) -> int | None:
        return self.opstack.items[-1] if self.opstack.items else None

    @property
    def running(self) -> bool:
        return not self.state.terminal

    def debug_dump(self):
        state = [f'IP:{self.ip}', f'STEPS:{self.steps}', f'STATE:{self.state}']
        state.extend([f'{reg}:{val}' for reg, val in self.bank.gp.items()])
        state.append(f'STACK:{list(self.opstack.items)}')

        lg.debug(' '.join(state))

    # - Helpers - #

    def arithm_pair(self, op: Callable[[int, int], int]):
        self.opstack.require(2)
        rhs = self.opstack.peek_at(self.opstack.index_from_top(0))
        lhs = self.opstack.peek_at(self.opstack.index_from_top(1))
        result = check_int32(op(lhs, rhs))

        self.opstack.pop()
        self.opstack.pop()
        self.opstack.push(result)

    # - Operations - #

    def psh(self, inst: ops.Psh):
        self.opstack.push(inst.value)

    def pop(self, _: ops.Pop):
        self.opstack.pop()

    def add(self, _: ops.Add):
        self.arithm_pair(lambda a, b: a + b)

    def sub(self, _: ops.Sub):
        self.arithm_pair(lambda a, b: a - b)

    def mul(self, _: ops.Mul):
        self.arithm_pair(lambda a, b: a * b)

    def div(self, _: ops.Div):
        self.arithm_pair(div_trunc)

    def set(self, inst: ops.Set):
        self.bank.set(inst.reg, inst.value)

    def cpy(self, inst: ops.Cpy):
        addr.copy(inst.src, inst.dst, self.bank, self.opstack)

    def jmp(self, inst: ops.Jmp):
        target = self.ip + inst.offset

        if target < 0 or target >= len(self.program):
            raise f.InvalidJumpTarget(
                f'{self.ip} {inst.offset:+d} -> {target} outside program of {len(self.program)}'
            )

        self.next_ip = target

    def hlt(self, _: ops.Hlt):
        raise Halt()

    HANDLERS: ClassVar[Mapping[type, Callable]] = {
        ops.Psh: psh,
        ops.Pop: pop,
        ops.Add: add,
        ops.Sub: sub,
        ops.Mul: mul,
        ops.Div: div,
        ops.Set: set,
        ops.Cpy: cpy,
        ops.Jmp: jmp,
        ops.Hlt: hlt,
    }

    # -- Implementation -- #

    def fetch(self) -> ops.Instruction:
        if self.ip < 0 or self.ip >= len(self.program):
            raise f.ProgramEnd(f'No instruction at {self.ip}, missing HLT?')

        return self.program[self.ip]

    def step(self) -> ExecutionState:
        if self.state.terminal:
            return self.state

        try:
            inst = self.fetch()
            lg.debug(f'{self.ip:04}: {inst}')

            self.next_ip = self.ip + 1
            handler = self.HANDLERS[type(inst)]
            handler(self, inst)

            self.ip = self.next_ip

        except Halt:
            lg.info(f'Execution halted at {self.ip}')
            self.state = HALTED

        except f.Fault as e:
            lg.info(f'Execution faulted at {self.ip}: {e}')
            self.state = Faulted(e)

        self.steps += 1
        return self.state

    def run(self) -> ExecutionState:
        while not self.state.terminal:
            self.step()

        self.debug_dump()
        return self.state
