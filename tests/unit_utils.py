from typing import Sequence

import vyantra.common.ops as ops
import vyantra.runtime.cpu as cpu


def make_cpu(program: Sequence[ops.Instruction], capacity: int | None = None) -> cpu.CPU:
    return cpu.CPU(program, stack_capacity=capacity)


def run_program(program: Sequence[ops.Instruction], capacity: int | None = None) -> cpu.CPU:
    proc = make_cpu(program, capacity)
    proc.run()
    return proc


def step_to_end(program: Sequence[ops.Instruction], capacity: int | None = None) -> cpu.CPU:
    proc = make_cpu(program, capacity)

    while proc.running:
        proc.step()

    return proc


def fault_of(proc: cpu.CPU):
    assert isinstance(proc.state, cpu.Faulted), f'Expected a fault, got {proc.state}'
    return proc.state.fault
