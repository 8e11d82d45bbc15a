from dataclasses import dataclass


def _check_int(name: str, value: object):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'{name} must be an int, got {value!r}')


# - Stack locators - #

class Locator:
    def __str__(self) -> str:
        raise NotImplementedError()


@dataclass(frozen=True)
class Absolute(Locator):
    index: int  # 0 is the bottom of the stack

    def __post_init__(self):
        _check_int('Stack index', self.index)

    def __str__(self) -> str:
        return f'[{self.index}]'


@dataclass(frozen=True)
class FromTop(Locator):
    depth: int = 0  # 0 is the top of the stack

    def __post_init__(self):
        _check_int('Stack depth', self.depth)

    def __str__(self) -> str:
        return f'[top-{self.depth}]' if self.depth else '[top]'


@dataclass(frozen=True)
class PushTarget(Locator):
    # Writing appends a new slot, reading is never valid

    def __str__(self) -> str:
        return '[push]'


LOCATORS = (Absolute, FromTop, PushTarget)


# - Paths - #

class Path:
    def __str__(self) -> str:
        raise NotImplementedError()


@dataclass(frozen=True)
class Register(Path):
    reg: str

    def __post_init__(self):
        if not isinstance(self.reg, str):
            raise TypeError(f'Register id must be a str, got {self.reg!r}')

    def __str__(self) -> str:
        return f'%{self.reg}'


@dataclass(frozen=True)
class StackSlot(Path):
    locator: Locator

    def __post_init__(self):
        if not isinstance(self.locator, LOCATORS):
            raise TypeError(f'Unsupported stack locator {self.locator!r}')

    def __str__(self) -> str:
        return f'stack{self.locator}'


PATHS = (Register, StackSlot)


def top(depth: int = 0) -> StackSlot:
    return StackSlot(FromTop(depth))


def at(index: int) -> StackSlot:
    return StackSlot(Absolute(index))


def push_target() -> StackSlot:
    return StackSlot(PushTarget())
