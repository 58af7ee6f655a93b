from filecalc.formatter import format_outcome
from filecalc.runtime import Failure, evaluate
from filecalc.tokenizer import tokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "2 ** 3 ** 2",
    "-2 ** 2",
    "10 / 5/ 2",
    "10 / 0",
    "(1 + 2",
    "# comment only\n",
    "# header\n1 +\n  2 * 3\n",
    "9223372036854775807 + 1",
    "99999999999999999999",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    print(f"tokens: {' '.join(str(t) for t in tokenize(code))}")

    outcome = evaluate(code)
    if isinstance(outcome, Failure):
        print(outcome.errmsg)
    else:
        print(f"value: {outcome.value}")
    print(f"output: {format_outcome(outcome)!r}")
