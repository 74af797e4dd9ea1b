"""Sequencing of a validation run: load, generate, render."""

import asyncio
import logging
from collections.abc import Coroutine, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from commerce_validator_cli.arguments import resolve_invocation
from commerce_validator_cli.collaborator import (
    Validator,
    ValidatorFactory,
    load_from_file_system,
)
from commerce_validator_cli.errors import (
    UNKNOWN_MESSAGE,
    CollaboratorError,
    UnknownFailure,
    ValidatorCliError,
)
from commerce_validator_cli.report import print_error, print_report, print_welcome
from commerce_validator_cli.schemas import InvocationArgs, Report

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_DISPLAY_PRECISION = 2


def _run_coroutine(coro: Coroutine[Any, Any, Report]) -> Report:
    """Run a coroutine, in a worker thread when an event loop is already running."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coro).result()


def create_validator(
    factory: ValidatorFactory,
    decimal_display_precision: int = DEFAULT_DECIMAL_DISPLAY_PRECISION,
) -> Validator:
    try:
        validator = factory()
        validator.decimal_display_precision = decimal_display_precision
    except Exception as exc:
        raise CollaboratorError.from_exception(exc) from exc
    return validator


async def load_inputs(validator: Validator, args: InvocationArgs) -> None:
    """
    Load schema, model and optional product info, one after another.

    Args:
        validator: Collaborator to load into.
        args: Resolved paths.

    Raises:
        CollaboratorError: If any load fails.
    """
    try:
        logger.info(f"Loading schema: {args.schema_path}")
        await load_from_file_system(validator.schema, args.schema_path)

        logger.info(f"Loading model: {args.model_path}")
        await load_from_file_system(validator.model, args.model_path)

        if args.has_product_info:
            logger.info(f"Loading product info: {args.product_info_path}")
            await load_from_file_system(validator.product_info, args.product_info_path)
    except Exception as exc:
        raise CollaboratorError.from_exception(exc) from exc


def generate_report(validator: Validator) -> Report:
    """Trigger report generation and materialize the items in order."""
    try:
        validator.generate_report()
        report = Report.from_items(validator.report.get_items())
    except Exception as exc:
        raise CollaboratorError.from_exception(exc) from exc
    logger.debug(f"Report generated with {len(report.items)} items")
    return report


async def run_validation_async(
    argv: Sequence[str],
    factory: ValidatorFactory,
    decimal_display_precision: int = DEFAULT_DECIMAL_DISPLAY_PRECISION,
) -> Report:
    """
    Run one validation and print the report.

    Args:
        argv: Invocation arguments; element 0 is the script path.
        factory: Validator factory.
        decimal_display_precision: Precision forwarded to the validator.

    Returns:
        Report: The rendered report.

    Raises:
        ValidatorCliError: On any failure along the way.
    """
    validator = create_validator(factory, decimal_display_precision)
    print_welcome(str(getattr(validator, "version", UNKNOWN_MESSAGE)))

    args = resolve_invocation(argv)
    await load_inputs(validator, args)
    report = generate_report(validator)
    print_report(report)
    return report


def run_validation(
    argv: Sequence[str],
    factory: ValidatorFactory,
    decimal_display_precision: int = DEFAULT_DECIMAL_DISPLAY_PRECISION,
) -> Report | None:
    """
    Synchronous entry point. Prints any failure and returns None instead of raising.

    Args:
        argv: Invocation arguments; element 0 is the script path.
        factory: Validator factory.
        decimal_display_precision: Precision forwarded to the validator.

    Returns:
        Report | None: The report, or None when the run failed.
    """
    validation_coro = run_validation_async(argv, factory, decimal_display_precision)
    try:
        return _run_coroutine(validation_coro)
    except Exception as exc:
        error = exc if isinstance(exc, ValidatorCliError) else UnknownFailure(str(exc))
        logger.debug(
            f"Validation failed ({error.kind}): {error.message}", exc_info=True
        )
        print_error(error.message)
        return None
