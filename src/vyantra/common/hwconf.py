WORD_BITS = 32
INT32_MIN = -(1 << (WORD_BITS - 1))
INT32_MAX = (1 << (WORD_BITS - 1)) - 1

DEFAULT_STACK_CAPACITY: int | None = None   # Unbounded unless the host asks otherwise


def is_int32(value: object) -> bool:
    # bool is an int subclass but never a valid literal
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    return INT32_MIN <= value <= INT32_MAX
