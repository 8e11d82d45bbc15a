from typing import List, Literal


Register = Literal['a', 'b', 'c', 'd', 'e', 'f']
REGISTERS: List[Register] = ['a', 'b', 'c', 'd', 'e', 'f']
NUMBER_OF_REGISTERS = len(REGISTERS)


def is_register(reg: object) -> bool:
    return isinstance(reg, str) and reg in REGISTERS
