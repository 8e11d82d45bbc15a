class Fault(Exception):
    """Unrecoverable execution error. Carried as data by the Faulted state."""

    kind = 'Fault'

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f'{self.kind}: {self.message}'

        return self.kind

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.message == other.message  # type: ignore

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class StackUnderflow(Fault):
    kind = 'StackUnderflow'


class StackOverflow(Fault):
    kind = 'StackOverflow'


class InvalidRegister(Fault):
    kind = 'InvalidRegister'


class InvalidStackAddress(Fault):
    kind = 'InvalidStackAddress'


class ArithmeticOverflow(Fault):
    kind = 'ArithmeticOverflow'


class DivisionByZero(Fault):
    kind = 'DivisionByZero'


class InvalidJumpTarget(Fault):
    kind = 'InvalidJumpTarget'


class ProgramEnd(InvalidJumpTarget):
    # Ran off the end of the program without HLT
    kind = 'ProgramEnd'
