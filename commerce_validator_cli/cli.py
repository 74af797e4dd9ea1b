import logging
import sys

import typer
from dotenv import load_dotenv

from commerce_validator_cli.arguments import resolve_invocation
from commerce_validator_cli.collaborator import load_validator_factory
from commerce_validator_cli.driver import (
    DEFAULT_DECIMAL_DISPLAY_PRECISION,
    run_validation,
)
from commerce_validator_cli.errors import ValidatorCliError
from commerce_validator_cli.loggy import setup_logging
from commerce_validator_cli.report import print_error

logger = logging.getLogger(__name__)

app = typer.Typer()


def build_argv(script_path: str, *positional: str | None) -> list[str]:
    """Rebuild an argv-style list from the script path and supplied positionals."""
    argv = [script_path]
    for value in positional:
        if value is None:
            break
        argv.append(value)
    return argv


@app.command()
def main(
    schema: str | None = typer.Argument(
        None, help="Schema file, relative to the directory of this script"
    ),
    model: str | None = typer.Argument(
        None, help="3D model file (glb), relative to the directory of this script"
    ),
    product_info: str | None = typer.Argument(
        None, help="Optional product information json"
    ),
    validator: str | None = typer.Option(
        None,
        "--validator",
        "-V",
        envvar="COMMERCE_VALIDATOR",
        help="Validator factory as package.module:attr (default: installed plugin)",
    ),
    precision: int = typer.Option(
        DEFAULT_DECIMAL_DISPLAY_PRECISION,
        "--precision",
        "-p",
        min=0,
        help="Decimal places shown in report messages",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Validate a 3D model against a 3D commerce schema and print the report."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)

    argv = build_argv(sys.argv[0], schema, model, product_info)
    try:
        resolve_invocation(argv)
        factory = load_validator_factory(validator)
    except ValidatorCliError as e:
        print_error(e.message)
        raise typer.Exit(code=1)

    report = run_validation(argv, factory, decimal_display_precision=precision)
    if report is None:
        raise typer.Exit(code=1)
    logger.info(f"Validation report printed with {len(report.items)} items")


def run() -> None:
    load_dotenv()
    app()


if __name__ == "__main__":
    run()
