"""
Natural Number CLI - командная строка для работы с натуральными числами.

Однократный запуск:
    natural-number 1002003 --count-zeros --digit 0 --digit 9 --reversed

Интерактивный режим:
    natural-number --interactive
"""

import argparse
import json
import sys
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional, TextIO

from src.app.config import SessionConfig
from src.app.session import (
    MSG_NO_NUMBER,
    DigitResult,
    NaturalNumberSession,
    OperationStatus,
)
from src.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)


INTERACTIVE_HELP = """Commands:
  number <n>   create the current number
  check <text> validate text without creating a number
  zeros        count zero digits
  digit <i>    digit at index i (0 = most significant)
  reversed     reversed copy of the current number
  reverse      reverse the current number in place
  show         print the current number
  export       print the current number as JSON
  help         show this help
  quit         exit"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="natural-number",
        description="Digit operations on arbitrary-length natural numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count zeros and read two digits
  natural-number 1002003 --count-zeros --digit 0 --digit 9

  # Reverse in place and print JSON
  natural-number 500 --reverse-in-place --json

  # Interactive session
  natural-number --interactive
""",
    )

    parser.add_argument(
        "number",
        nargs="?",
        help="Natural number (digits, first digit 1-9)",
    )
    parser.add_argument(
        "--digit",
        action="append",
        default=[],
        metavar="INDEX",
        help="Print the digit at INDEX (repeatable)",
    )
    parser.add_argument(
        "--count-zeros",
        action="store_true",
        help="Print the number of zero digits",
    )
    parser.add_argument(
        "--reversed",
        action="store_true",
        help="Print the reversed number (current number unchanged)",
    )
    parser.add_argument(
        "--reverse-in-place",
        action="store_true",
        help="Reverse the current number and print it",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as one JSON document",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start a line-oriented interactive session",
    )
    parser.add_argument(
        "--log-level",
        default=SessionConfig.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {SessionConfig.log_level})",
    )

    args = parser.parse_args(argv)
    if args.number is None and not args.interactive:
        parser.error("a NUMBER is required unless --interactive is given")
    return args


def _result_to_dict(result: Any) -> Dict[str, Any]:
    data = asdict(result)
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


def _format_digit(result: DigitResult) -> str:
    if result.status is OperationStatus.OK and not result.in_range:
        return f"{result.message} (out of range)"
    return result.message


# =============================================================================
# ONE-SHOT MODE
# =============================================================================


def run_once(args: argparse.Namespace, config: SessionConfig, out: TextIO) -> int:
    """
    Выполнение запрошенных операций над одним числом.

    Порядок: создание → нули → цифры → разворот → разворот на месте.

    Returns:
        Код возврата (0 — успех, 1 — число не создано)
    """
    session = NaturalNumberSession()
    created = session.create_number(args.number)

    results: Dict[str, Any] = {"number": _result_to_dict(created)}
    lines: List[str] = [created.message]

    if created.status is not OperationStatus.OK:
        if args.json:
            print(json.dumps(results, indent=config.json_indent), file=out)
        else:
            print(created.message, file=out)
        return 1

    if args.count_zeros:
        zeros = session.count_zeros()
        results["count_zeros"] = _result_to_dict(zeros)
        lines.append(zeros.message)

    if args.digit:
        digits = [session.get_digit(index_text) for index_text in args.digit]
        results["digits"] = [_result_to_dict(d) for d in digits]
        lines.extend(_format_digit(d) for d in digits)

    if args.reversed:
        reversed_result = session.reverse_new()
        results["reversed"] = _result_to_dict(reversed_result)
        lines.append(reversed_result.message)

    if args.reverse_in_place:
        in_place = session.reverse_in_place()
        results["reverse_in_place"] = _result_to_dict(in_place)
        lines.append(in_place.message)

    if args.json:
        results["export"] = session.export()
        print(json.dumps(results, indent=config.json_indent), file=out)
    else:
        for line in lines:
            print(line, file=out)

    return 0


# =============================================================================
# INTERACTIVE MODE
# =============================================================================


def run_interactive(config: SessionConfig, stdin: TextIO, out: TextIO) -> int:
    """
    Построчный интерактивный режим.

    Каждая команда выполняется полностью до чтения следующей строки.
    """
    session = NaturalNumberSession()
    print(INTERACTIVE_HELP, file=out)

    while True:
        print(config.prompt, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break

        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()

        if not command:
            continue
        if command in ("quit", "exit"):
            break

        if command == "number":
            print(session.create_number(argument).message or "Number cleared", file=out)
        elif command == "check":
            feedback = session.check_input(argument)
            if feedback.message:
                print(f"{feedback.state.value}: {feedback.message}", file=out)
            else:
                print(feedback.state.value, file=out)
        elif command == "zeros":
            print(session.count_zeros().message, file=out)
        elif command == "digit":
            print(_format_digit(session.get_digit(argument)), file=out)
        elif command == "reversed":
            print(session.reverse_new().message, file=out)
        elif command == "reverse":
            print(session.reverse_in_place().message, file=out)
        elif command == "show":
            current = session.current_number
            if current is None:
                print(MSG_NO_NUMBER, file=out)
            else:
                print(f"Current number: {current} ({current.length} digits)", file=out)
        elif command == "export":
            exported = session.export()
            if exported is None:
                print(MSG_NO_NUMBER, file=out)
            else:
                print(json.dumps(exported, indent=config.json_indent), file=out)
        elif command == "help":
            print(INTERACTIVE_HELP, file=out)
        else:
            print(f"Unknown command: {command}. Type 'help' for commands.", file=out)

    return 0


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    config = SessionConfig(log_level=args.log_level)
    setup_logging(config.log_level)
    logger.debug("Starting with %s", args)

    out = out or sys.stdout
    if args.interactive:
        return run_interactive(config, stdin or sys.stdin, out)
    return run_once(args, config, out)


if __name__ == "__main__":
    sys.exit(main())
