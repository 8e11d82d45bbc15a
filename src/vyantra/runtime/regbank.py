from types import MappingProxyType
from typing import Dict, Mapping

import vyantra.common.registers as regs
import vyantra.runtime.faults as f


class RegisterBank():
    gp: Dict[regs.Register, int]  # General purpose registers

    def __init__(self):
        self.gp = {reg: 0 for reg in regs.REGISTERS}

    def check(self, reg: str):
        if not regs.is_register(reg):
            raise f.InvalidRegister(f'Unknown register {reg!r}')

    def get(self, reg: str) -> int:
        self.check(reg)
        return self.gp[reg]  # type: ignore

    def set(self, reg: str, val: int):
        self.check(reg)
        self.gp[reg] = val  # type: ignore

    def values(self) -> Mapping[regs.Register, int]:
        return MappingProxyType(dict(self.gp))
