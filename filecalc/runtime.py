from dataclasses import dataclass

from filecalc.parser import CalcError, Parser
from filecalc.value import Value


@dataclass(frozen=True)
class Success:
    value: Value


@dataclass(frozen=True)
class Failure:
    position: int
    errmsg: str = ""


EvaluationOutcome = Success | Failure


def decode_source(buffer: bytes | str) -> str:
    """Latin-1 maps every byte to exactly one character, so positions count bytes"""
    if isinstance(buffer, str):
        return buffer
    return buffer.decode("latin-1")


def evaluate(buffer: bytes | str) -> EvaluationOutcome:
    code = decode_source(buffer)
    parser = Parser(code)
    try:
        return Success(parser.parse())
    except CalcError as e:
        return Failure(position=e.position, errmsg=str(e))
    except RecursionError:
        return Failure(position=parser.current.position, errmsg="Expression is nested too deeply")
