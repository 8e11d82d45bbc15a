import pytest

import vyantra.common.registers as regs
import vyantra.runtime.faults as f
from vyantra.runtime.regbank import RegisterBank


def test_all_registers_start_at_zero():
    bank = RegisterBank()

    assert dict(bank.values()) == {reg: 0 for reg in regs.REGISTERS}
    assert len(bank.values()) == regs.NUMBER_OF_REGISTERS


def test_set_get():
    bank = RegisterBank()
    bank.set('c', -7)

    assert bank.get('c') == -7
    assert bank.get('a') == 0


@pytest.mark.parametrize('reg', ['g', 'A', '', 'void'])
def test_unknown_register(reg):
    bank = RegisterBank()

    with pytest.raises(f.InvalidRegister):
        bank.get(reg)

    with pytest.raises(f.InvalidRegister):
        bank.set(reg, 1)

    assert reg not in bank.values()


def test_values_is_read_only():
    bank = RegisterBank()
    snapshot = bank.values()

    with pytest.raises(TypeError):
        snapshot['a'] = 1  # type: ignore

    bank.set('a', 5)
    assert snapshot['a'] == 0
