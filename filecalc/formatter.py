import math

from filecalc.runtime import EvaluationOutcome, Failure, Success
from filecalc.utils import fits_int64
from filecalc.value import Float, Integer, Value

INTEGRAL_TOLERANCE = 1e-12


def format_value(value: Value) -> str:
    if isinstance(value, Integer):
        return str(value.v)
    elif isinstance(value, Float):
        x = value.v
        if math.isfinite(x):
            nearest = round(x)
            # whole numbers only print as integers while they fit in 64 bits
            if fits_int64(nearest) and abs(x - nearest) < INTEGRAL_TOLERANCE:
                return str(nearest)
        return format(x, ".15g")
    else:
        raise TypeError(f"Cannot format {value.type_name()}")


def format_outcome(outcome: EvaluationOutcome) -> str:
    if isinstance(outcome, Failure):
        return f"ERROR:{outcome.position}\n"
    elif isinstance(outcome, Success):
        return format_value(outcome.value) + "\n"
    else:
        raise TypeError(f"Unexpected outcome: {outcome!r}")
