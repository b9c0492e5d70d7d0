"""
CLI entry point for tcpstate.

Provides commands for dispatching operations against a fresh connection,
running the scripted demo, and printing the transition table.
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import Settings
from .connection import Connection
from .demo import run_demo
from .exceptions import ConfigurationError, UnknownOperationError
from .logging_config import setup_logging
from .models import ConnectionState, Operation
from .trace import TRACE_FORMATS, TraceWriter
from .transitions import TRANSITIONS, rejection_message


def _operation(value: str) -> Operation:
    try:
        return Operation.parse(value)
    except UnknownOperationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _connection(settings: Settings) -> Connection:
    return Connection(
        sinks=[TraceWriter(fmt=settings.trace_format)],
        announce=settings.announce_initial_state,
    )


def _print_final_state(connection: Connection, settings: Settings, separate: bool = False) -> None:
    if settings.trace_format == "json":
        print(json.dumps({"final_state": connection.current_state_name()}))
    else:
        print(("\n" if separate else "") + f"Final state: {connection.current_state_name()}")


def run_operations(args, settings: Settings) -> None:
    """Dispatch the given operations in order and print the final state."""
    connection = _connection(settings)
    connection.run(args.operations)
    _print_final_state(connection, settings)


def run_demo_command(args, settings: Settings) -> None:
    """Run the scripted demo scenarios."""
    connection = run_demo(_connection(settings))
    _print_final_state(connection, settings, separate=True)


def print_table(args, settings: Settings) -> None:
    """Print the transition table, including rejected combinations."""
    for state in ConnectionState:
        for operation in Operation:
            transition = TRANSITIONS.get((state, operation))
            if transition is None:
                target = state.name
                effect = rejection_message(operation)
            else:
                target = transition.target.name
                effect = transition.effect
            print(f"{state.name:<12} {operation.display_name:<12} -> {target:<12} {effect}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulated TCP connection state machine",
        prog="python -m tcpstate",
    )
    parser.add_argument(
        "--format",
        dest="trace_format",
        choices=TRACE_FORMATS,
        default=None,
        help="Trace output format (default: text, or TCPSTATE_TRACE_FORMAT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING, or TCPSTATE_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser(
        "run",
        help="Dispatch operations against a new connection, starting in CLOSED",
    )
    run_parser.add_argument(
        "operations",
        nargs="+",
        type=_operation,
        metavar="OPERATION",
        help=f"One of: {', '.join(op.cli_name for op in Operation)}",
    )
    run_parser.set_defaults(handler=run_operations)

    demo_parser = subparsers.add_parser("demo", help="Run the scripted demo scenarios")
    demo_parser.set_defaults(handler=run_demo_command)

    table_parser = subparsers.add_parser("table", help="Print the transition table")
    table_parser.set_defaults(handler=print_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = Settings.from_env(
            log_level=args.log_level,
            trace_format=args.trace_format,
        )
    except ConfigurationError as e:
        parser.error(e.message)

    setup_logging(settings.log_level)
    args.handler(args, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
