"""
ABOUTME: Command-line interface for checking environment variables strictly
ABOUTME: Handles argument parsing, .env layering, result rendering and exit status
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional
from uuid import UUID

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import classify
from .outcome import Invalid, Missing, Outcome
from .parsers import I8, I16, I32, I64, U8, U16, U32, U64
from .sources import ChainSource, DotenvSource, EnvironSource, Source

console = Console()

TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
    "path": Path,
    "uuid": UUID,
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
    "i8": I8,
    "i16": I16,
    "i32": I32,
    "i64": I64,
}


def build_source(env_file: Optional[str], use_env_file: bool = True) -> Source:
    """
    Layer the process environment over a .env file.

    An explicit ``env_file`` must exist. Without one, ``./.env`` is used when
    present and silently skipped otherwise.
    """
    if not use_env_file:
        logging.debug("Skipping .env file, using process environment only")
        return EnvironSource()

    if env_file is None:
        default_path = Path(".env")
        if not default_path.is_file():
            logging.debug("No .env file found, using process environment only")
            return EnvironSource()
        env_file = str(default_path)

    return ChainSource(EnvironSource(), DotenvSource(env_file))


def cli() -> argparse.Namespace:
    """Parse and return command-line arguments."""
    p = argparse.ArgumentParser(
        prog="strict-env",
        description="Check that environment variables are set and parse into a type",
    )
    p.add_argument("names", nargs="+", metavar="NAME", help="Variable names to check")
    p.add_argument(
        "--type",
        dest="type_name",
        default="str",
        choices=list(TYPES),
        help="Target type every variable must parse into",
    )
    p.add_argument(
        "--optional",
        action="store_true",
        help="Treat unset variables as OK; invalid values still fail",
    )
    p.add_argument("--env-file", type=str, help="Read this .env file under the process environment")
    p.add_argument(
        "--no-env-file", action="store_true", help="Ignore .env files entirely"
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of a rich table",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument("--version", action="version", version="strict-env 0.1.0")
    return p.parse_args()


def is_failure(outcome: Outcome, optional: bool) -> bool:
    if isinstance(outcome, Invalid):
        return True
    return isinstance(outcome, Missing) and not optional


def describe(outcome: Outcome) -> dict:
    """Flatten an outcome into a JSON-friendly row."""
    if isinstance(outcome, Missing):
        return {"status": "missing", "error": str(outcome.error())}
    if isinstance(outcome, Invalid):
        return {
            "status": "invalid",
            "raw": outcome.raw,
            "error": str(outcome.error()),
        }
    return {"status": "ok", "value": outcome.value}


def render_table(results: dict, optional: bool) -> None:
    table = Table(title="Environment Check", show_header=True, header_style="bold magenta")
    table.add_column("Variable", style="cyan")
    table.add_column("Status")
    table.add_column("Value / Error")

    for name, outcome in results.items():
        row = describe(outcome)
        if row["status"] == "ok":
            table.add_row(name, "[green]ok[/green]", escape(str(row["value"])))
        elif row["status"] == "missing" and optional:
            table.add_row(name, "[yellow]unset[/yellow]", "")
        else:
            table.add_row(name, f"[red]{row['status']}[/red]", escape(row["error"]))

    console.print(table)


def render_json(results: dict) -> None:
    print(json.dumps({name: describe(outcome) for name, outcome in results.items()}, indent=2, default=str))


def main() -> None:
    """
    Execute the strict-env command-line tool.

    Parses arguments, configures rich logging, builds the lookup source and
    classifies every requested variable. Exits 0 when all of them are OK and 1
    when any is invalid, or missing without ``--optional``.
    """
    a = cli()

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        source = build_source(a.env_file, not a.no_env_file)
    except FileNotFoundError as e:
        console.print(f"❌ {e}")
        sys.exit(1)

    target = TYPES[a.type_name]
    results = {}
    for name in a.names:
        results[name] = classify(name, target, source=source)
        logging.info(f"{name}: {describe(results[name])['status']}")

    if a.json:
        render_json(results)
    else:
        render_table(results, a.optional)

    if any(is_failure(outcome, a.optional) for outcome in results.values()):
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
