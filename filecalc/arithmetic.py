import math
from dataclasses import dataclass
from typing import Type

from filecalc.value import BinaryOperationImpl, Float, Integer, UnaryOperationImpl, Value, is_zero


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


class DivisionByZero(CalcRuntimeError):
    def __init__(self) -> None:
        super().__init__("Division by zero")


OperandType = Type[Value] | tuple[Type[Value], ...]
BinaryOperationImplTable = list[tuple[tuple[OperandType, OperandType], BinaryOperationImpl]]

NUMBER = (Integer, Float)


def eval_binary_operation(table: BinaryOperationImplTable, a: Value, b: Value, op_name: str) -> Value:
    for (type_a, type_b), impl in table:
        if isinstance(a, type_a) and isinstance(b, type_b):
            return impl(a, b)
    else:
        raise CalcRuntimeError(f"{op_name} is not defined for {a.type_name()} and {b.type_name()}")


def _checked_div(a: Value, b: Value) -> Value:
    if is_zero(b):
        raise DivisionByZero()
    return Float(a.as_float() / b.as_float())


def _is_odd_integral(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def real_pow(base: float, exp: float) -> float:
    """math.pow with C pow() results instead of exceptions on overflow and domain errors"""
    try:
        return math.pow(base, exp)
    except OverflowError:
        if base < 0 and _is_odd_integral(exp):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # zero to a negative power is a pole
            if _is_odd_integral(exp):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


# integer rows go first, a pair involving a float falls through to the promoting row
add_impls: BinaryOperationImplTable = [
    ((Integer, Integer), lambda a, b: Integer(a.v + b.v)),  # type: ignore
    ((NUMBER, NUMBER), lambda a, b: Float(a.as_float() + b.as_float())),
]
sub_impls: BinaryOperationImplTable = [
    ((Integer, Integer), lambda a, b: Integer(a.v - b.v)),  # type: ignore
    ((NUMBER, NUMBER), lambda a, b: Float(a.as_float() - b.as_float())),
]
mul_impls: BinaryOperationImplTable = [
    ((Integer, Integer), lambda a, b: Integer(a.v * b.v)),  # type: ignore
    ((NUMBER, NUMBER), lambda a, b: Float(a.as_float() * b.as_float())),
]
div_impls: BinaryOperationImplTable = [((NUMBER, NUMBER), _checked_div)]
pow_impls: BinaryOperationImplTable = [((NUMBER, NUMBER), lambda a, b: Float(real_pow(a.as_float(), b.as_float())))]


def add(a: Value, b: Value) -> Value:
    return eval_binary_operation(table=add_impls, a=a, b=b, op_name="Addition")


def subtract(a: Value, b: Value) -> Value:
    return eval_binary_operation(table=sub_impls, a=a, b=b, op_name="Subtraction")


def multiply(a: Value, b: Value) -> Value:
    return eval_binary_operation(table=mul_impls, a=a, b=b, op_name="Multiplication")


def divide(a: Value, b: Value) -> Value:
    """Raises DivisionByZero, the caller knows where the '/' was"""
    return eval_binary_operation(table=div_impls, a=a, b=b, op_name="Division")


def power(base: Value, exp: Value) -> Value:
    return eval_binary_operation(table=pow_impls, a=base, b=exp, op_name="Power")


UnaryOperationImplTable = list[tuple[Type[Value], UnaryOperationImpl]]


def eval_unary_operation(table: UnaryOperationImplTable, operand: Value, op_name: str) -> Value:
    for operand_type, impl in table:
        if isinstance(operand, operand_type):
            return impl(operand)
    else:
        raise CalcRuntimeError(f"{op_name} is not defined for {operand.type_name()}")


neg_impls: UnaryOperationImplTable = [
    (Integer, lambda a: Integer(-a.v)),  # type: ignore
    (Float, lambda a: Float(-a.v)),  # type: ignore
]


def negate(operand: Value) -> Value:
    return eval_unary_operation(table=neg_impls, operand=operand, op_name="Negation")
