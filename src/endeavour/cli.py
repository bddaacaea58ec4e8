"""
Command-line entry point — a small tour of the outcome algebra.

    endeavour                      # same as `endeavour demo`
    endeavour success
    endeavour chain --input "fail me" -v
    endeavour success chain failure   # runs in order, stops at the first failure

Every command returns an Outcome. The commands given on the command line are
chained with flat_map, so the first failure short-circuits the rest, and the
terminal outcome is folded into the process exit status (0 success,
1 failure). Unknown commands are a usage error (exit 2).

Responsibilities:
  1. Load EndeavourSettings (environment / .env)
  2. Configure structlog
  3. Parse arguments and run the requested commands
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Sequence

import structlog
from pydantic import ValidationError

from endeavour import __version__
from endeavour.config import EndeavourSettings
from endeavour.outcome import Failure, Outcome
from endeavour.outcome_failures import OutcomeFailures

EXIT_OK = 0
EXIT_FAILURE = 1

log = structlog.get_logger()


def configure_structlog(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog for the command-line run.

    `console` renders colored, human-readable lines; `json` renders one JSON
    object per line. Unknown level names fall back to INFO.
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


@dataclass(frozen=True)
class CommandContext:
    """Options shared by every command."""

    verbose: bool = False
    input: str = "initial"

    def echo(self, message: str) -> None:
        if self.verbose:
            print(f"   {message}")  # noqa: T201


# ──────────────────────── Commands ────────────────────────


def success_command(ctx: CommandContext) -> Outcome[str]:
    outcome = Outcome.success("Hello from Endeavour!")
    return outcome.if_success(lambda s: print(f"Success: {s.get()}"))  # noqa: T201


def failure_command(ctx: CommandContext) -> Outcome[str]:
    return OutcomeFailures.with_details("This is a demonstration error")


def _step_one(ctx: CommandContext, text: str) -> Outcome[str]:
    ctx.echo(f"Processing step 1 with: {text}")
    return Outcome.success(f"{text} -> step1")


def _step_two(ctx: CommandContext, text: str) -> Outcome[str]:
    ctx.echo(f"Processing step 2 with: {text}")
    if "fail" in text:
        return OutcomeFailures.with_details("Step 2 failed on input {}", text)
    return Outcome.success(f"{text} -> step2")


def _step_three(ctx: CommandContext, text: str) -> Outcome[str]:
    ctx.echo(f"Processing step 3 with: {text}")
    return Outcome.success(f"{text} -> step3")


def chain_command(ctx: CommandContext) -> Outcome[str]:
    """Pipe --input through three steps; step 2 rejects text containing 'fail'."""
    return (
        Outcome.success(ctx.input)
        .flat_map(lambda text: _step_one(ctx, text))
        .flat_map(lambda text: _step_two(ctx, text))
        .flat_map(lambda text: _step_three(ctx, text))
        .if_success(lambda s: print(f"Chain completed: {s.get()}"))  # noqa: T201
    )


def demo_command(ctx: CommandContext) -> Outcome[Any]:
    """Run every example and report each, whatever its outcome."""
    print("=== Endeavour Demo ===")  # noqa: T201
    for number, (name, command) in enumerate(_EXAMPLES, start=1):
        print(f"\n{number}. {name}:")  # noqa: T201
        command(ctx).if_failure(
            lambda f: print(f"Failure [{f.category}]: {f.description.total_message}")  # noqa: T201
        )
    return Outcome.success()


_EXAMPLES: list[tuple[str, Callable[[CommandContext], Outcome[Any]]]] = [
    ("Success example", success_command),
    ("Failure example", failure_command),
    ("Chain example", chain_command),
]

COMMANDS: dict[str, Callable[[CommandContext], Outcome[Any]]] = {
    "demo": demo_command,
    "success": success_command,
    "failure": failure_command,
    "chain": chain_command,
}


# ──────────────────────── Runner ────────────────────────


def run_all_stop_on_error(names: Sequence[str], ctx: CommandContext) -> Outcome[list[Any]]:
    """
    Run commands in order, collecting their payloads, until one fails.

    A command that raises is captured as a Failure by flat_map.
    """
    outcome: Outcome[list[Any]] = Outcome.success([])
    for name in names:
        outcome = outcome.flat_map(
            lambda done, name=name: _run_one(name, ctx).map(lambda value: [*done, value])
        )
    return outcome


def _run_one(name: str, ctx: CommandContext) -> Outcome[Any]:
    log.info("cli.command_started", command=name)
    return COMMANDS[name](ctx).act(
        lambda outcome: log.info("cli.command_finished", command=name, success=outcome.is_success())
    )


def _report_failure(failure: Failure[Any]) -> int:
    print(failure.detail or failure.title, file=sys.stderr)  # noqa: T201
    return EXIT_FAILURE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="endeavour",
        description="Endeavour CLI - demonstrates functional error handling",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo every pipeline step")
    parser.add_argument("--input", default="initial", help="text fed to the chain command")
    parser.add_argument(
        "commands",
        nargs="*",
        metavar="COMMAND",
        help=f"one or more of: {', '.join(COMMANDS)} (default: demo)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the commands and return the exit status."""
    try:
        settings = EndeavourSettings()
    except ValidationError as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        return EXIT_FAILURE

    configure_structlog(settings.log_level, settings.log_format)

    parser = build_parser()
    args = parser.parse_args(argv)
    names = args.commands or ["demo"]
    unknown = [name for name in names if name not in COMMANDS]
    if unknown:
        parser.error(f"unknown command(s): {', '.join(unknown)}; available: {', '.join(COMMANDS)}")

    ctx = CommandContext(verbose=args.verbose, input=args.input)
    if ctx.verbose:
        print("Endeavour CLI - verbose mode enabled")  # noqa: T201

    return run_all_stop_on_error(names, ctx).fold(lambda _: EXIT_OK, _report_failure)


if __name__ == "__main__":
    sys.exit(main())
