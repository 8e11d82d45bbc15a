from dataclasses import dataclass
from typing import ClassVar, Sequence

from vyantra.common.hwconf import is_int32
import vyantra.common.paths as p


class Instruction:
    mnemonic: ClassVar[str] = '???'

    def operands(self) -> Sequence[object]:
        return ()

    def __str__(self) -> str:
        args = ', '.join(str(o) for o in self.operands())
        return f'{self.mnemonic} {args}' if args else self.mnemonic


Program = Sequence[Instruction]


def _check_literal(value: object):
    if not is_int32(value):
        raise ValueError(f'Int32 literal {value!r} out of range')


# Stack

@dataclass(frozen=True)
class Psh(Instruction):
    mnemonic = 'PSH'    # literal -> [SP++]
    value: int

    def __post_init__(self):
        _check_literal(self.value)

    def operands(self):
        return (self.value,)


@dataclass(frozen=True)
class Pop(Instruction):
    mnemonic = 'POP'    # [--SP] -> void


# Arithmetic, [SP-2] OP [SP-1] -> [SP-2]

@dataclass(frozen=True)
class Add(Instruction):
    mnemonic = 'ADD'


@dataclass(frozen=True)
class Sub(Instruction):
    mnemonic = 'SUB'


@dataclass(frozen=True)
class Mul(Instruction):
    mnemonic = 'MUL'


@dataclass(frozen=True)
class Div(Instruction):
    mnemonic = 'DIV'


# Registers and paths

@dataclass(frozen=True)
class Set(Instruction):
    mnemonic = 'SET'    # literal -> R1
    reg: str
    value: int

    def __post_init__(self):
        if not isinstance(self.reg, str):
            raise TypeError(f'Register id must be a str, got {self.reg!r}')

        _check_literal(self.value)

    def operands(self):
        return (f'%{self.reg}', self.value)


@dataclass(frozen=True)
class Cpy(Instruction):
    mnemonic = 'CPY'    # P1 -> P2
    src: p.Path
    dst: p.Path

    def __post_init__(self):
        for path in (self.src, self.dst):
            if not isinstance(path, p.PATHS):
                raise TypeError(f'Unsupported path {path!r}')

    def operands(self):
        return (self.src, self.dst)


# Control

@dataclass(frozen=True)
class Jmp(Instruction):
    mnemonic = 'JMP'    # IP + S1 -> IP
    offset: int

    def __post_init__(self):
        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise TypeError(f'Jump offset must be an int, got {self.offset!r}')

    def operands(self):
        return (f'{self.offset:+d}',)


@dataclass(frozen=True)
class Hlt(Instruction):
    mnemonic = 'HLT'


INSTRUCTIONS: Sequence[type[Instruction]] = (
    Psh, Pop, Add, Sub, Mul, Div, Set, Cpy, Jmp, Hlt
)
