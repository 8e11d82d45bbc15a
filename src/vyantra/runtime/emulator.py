import sys
import logging as lg
import traceback
from typing import Dict

import click

import vyantra.common.ops as ops
import vyantra.common.paths as p
import vyantra.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_FAULT = 2
EXIT_STEP_LIMIT = 3
EXIT_EXEC_ERROR = 100


DEMOS: Dict[str, ops.Program] = {
    'demo': (
        ops.Psh(5),
        ops.Psh(6),
        ops.Pop(),
        ops.Psh(21),
        ops.Add(),
        ops.Pop(),
        ops.Hlt(),
    ),
    # (7 - 3) * 10 / 3, result kept in %a and on the stack
    'arith': (
        ops.Psh(7),
        ops.Psh(3),
        ops.Sub(),
        ops.Psh(10),
        ops.Mul(),
        ops.Psh(3),
        ops.Div(),
        ops.Cpy(p.top(), p.Register('a')),
        ops.Hlt(),
    ),
    'copy': (
        ops.Set('a', 42),
        ops.Cpy(p.Register('a'), p.push_target()),
        ops.Jmp(+2),
        ops.Set('a', 0),
        ops.Cpy(p.top(), p.Register('b')),
        ops.Hlt(),
    ),
}


def execute(
    program: ops.Program,
    stack_capacity: int | None = None,
    max_steps: int | None = None
) -> cpu.CPU:
    proc = cpu.CPU(program, stack_capacity)

    if max_steps is None:
        proc.run()
        return proc

    while proc.running and proc.steps < max_steps:
        proc.step()

    if proc.running:
        lg.info(f'Step limit {max_steps} reached at {proc.ip}')

    return proc


def dump(proc: cpu.CPU):
    click.echo(f'program: [{", ".join(str(i) for i in proc.program)}]')
    click.echo(f'ip: {proc.ip}')
    click.echo(f'stack: {list(proc.stack)}')
    click.echo(f'registers: {dict(proc.registers)}')
    click.echo(f'state: {proc.state}')


def exit_code(proc: cpu.CPU) -> int:
    match proc.state:
        case cpu.Halted():
            return EXIT_HALT
        case cpu.Faulted():
            return EXIT_FAULT
        case _:
            return EXIT_STEP_LIMIT


@click.command()
@click.argument('name', type=click.Choice(sorted(DEMOS)), default='demo')
@click.option('--capacity', type=click.IntRange(min=0), default=None, help='Operand stack capacity')
@click.option('--max-steps', type=click.IntRange(min=0), default=None, help='Stop after this many steps')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
def run(name: str, capacity: int | None, max_steps: int | None, trace: bool):
    lg.basicConfig(level=lg.DEBUG if trace else lg.INFO)
    lg.info('VYANTRA')

    try:
        proc = execute(DEMOS[name], capacity, max_steps)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        return sys.exit(EXIT_EXEC_ERROR)

    dump(proc)
    sys.exit(exit_code(proc))


if __name__ == '__main__':
    run()
