import argparse
import logging
from typing import Optional, Sequence

from exprcalc.calculator import Calculator
from exprcalc.errors import CalculationError

BANNER = "exprcalc: enter expressions, 'set x = value', 'debug on/off', 'help', or 'exit'"

HELP = "\n".join(
    [
        "Commands:",
        "  <expression>   evaluate, e.g. 2 + 3 * 4",
        "  set x = value  bind a variable",
        "  debug on/off   trace tokens and postfix form",
        "  exit           quit",
    ]
)


def handle_line(calc: Calculator, line: str) -> Optional[str]:
    """Runs one shell command, returning the text to print or None when the session should end"""
    line = line.strip()
    if not line:
        return ""
    if line == "exit":
        return None
    if line == "help":
        return HELP
    if line in ("debug on", "debug off"):
        calc.set_debug_mode(line == "debug on")
        return f"Debug mode {'enabled' if calc.debug else 'disabled'}"
    if line.startswith("set "):
        name, eq, value_str = line[len("set ") :].partition("=")
        if not eq:
            return "Error: Invalid set command, expected 'set <name> = <value>'"
        name = name.strip()
        try:
            calc.set_variable(name, float(value_str))
        except ValueError as e:
            return f"Error: {e}"
        return f"Set {name} = {calc.get_variable(name)}"

    try:
        result = calc.evaluate(line)
    except CalculationError as e:
        return e.pretty(line)
    return f"Result: {result}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="exprcalc", description="Interactive arithmetic expression calculator")
    parser.add_argument("--debug", action="store_true", help="Trace tokens and postfix form of every expression.")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger("exprcalc").setLevel(logging.INFO)

    calc = Calculator(debug=args.debug)
    print(BANNER)
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        output = handle_line(calc, line)
        if output is None:
            break
        if output:
            print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
