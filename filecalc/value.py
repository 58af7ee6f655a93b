import abc
from dataclasses import dataclass
from typing import Callable

from filecalc.utils import wrap_int64


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...

    @abc.abstractmethod
    def as_float(self) -> float:
        ...


UnaryOperationImpl = Callable[[Value], Value]
BinaryOperationImpl = Callable[[Value, Value], Value]


@dataclass(frozen=True)
class Integer(Value):
    v: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", wrap_int64(self.v))

    @classmethod
    def type_name(cls) -> str:
        return "Integer"

    def as_float(self) -> float:
        return float(self.v)


@dataclass(frozen=True)
class Float(Value):
    v: float

    @classmethod
    def type_name(cls) -> str:
        return "Float"

    def as_float(self) -> float:
        return self.v


def is_zero(value: Value) -> bool:
    if isinstance(value, Float):
        return abs(value.v) == 0.0
    elif isinstance(value, Integer):
        return value.v == 0
    else:
        raise TypeError(f"Zero test is not defined for {value.type_name()}")
