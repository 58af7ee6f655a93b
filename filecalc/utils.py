import enum

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def fits_int64(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


def wrap_int64(n: int) -> int:
    """Two's complement wraparound, the way a native 64-bit integer overflows"""
    return (n - INT64_MIN) % 2**64 + INT64_MIN
