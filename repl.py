from filecalc.formatter import format_value
from filecalc.runtime import Failure, evaluate


if __name__ == "__main__":
    while True:
        try:
            code = input("> ")
        except EOFError:
            break

        outcome = evaluate(code)
        if isinstance(outcome, Failure):
            print(outcome.errmsg)
            continue

        print(format_value(outcome.value))
