"""Resolve schema, model and product info paths from invocation arguments.

Paths are resolved relative to the directory of the invoked script
(``argv[0]``), not the current working directory.
"""

import logging
from collections.abc import Sequence

from commerce_validator_cli.errors import MissingArgumentError
from commerce_validator_cli.schemas import InvocationArgs

logger = logging.getLogger(__name__)

MISSING_SCHEMA_MESSAGE = "A schema and 3D model need to be provided as arguments"
MISSING_MODEL_MESSAGE = "A 3D model needs to be provided as the second argument"


def resolve_base_path(argv: Sequence[str]) -> str:
    """
    Directory of the invoked script, including the trailing separator.

    Args:
        argv: Invocation arguments; element 0 is the script path.

    Returns:
        str: Prefix up to and including the last "/", or "" when there is none.
    """
    script_path = argv[0] if argv else ""
    return script_path[: script_path.rfind("/") + 1]


def resolve_schema_path(argv: Sequence[str]) -> str:
    if len(argv) < 2:
        raise MissingArgumentError(MISSING_SCHEMA_MESSAGE)
    return resolve_base_path(argv) + argv[1]


def resolve_model_path(argv: Sequence[str]) -> str:
    if len(argv) < 3:
        raise MissingArgumentError(MISSING_MODEL_MESSAGE)
    return resolve_base_path(argv) + argv[2]


def resolve_product_info_path(argv: Sequence[str]) -> str:
    """Optional third positional argument; empty string when absent."""
    if len(argv) < 4:
        return ""
    return resolve_base_path(argv) + argv[3]


def resolve_invocation(argv: Sequence[str]) -> InvocationArgs:
    """
    Resolve every path up front so missing arguments fail before any I/O.

    Args:
        argv: Invocation arguments; element 0 is the script path.

    Returns:
        InvocationArgs: Resolved paths.

    Raises:
        MissingArgumentError: If the schema or model argument is missing.
    """
    args = InvocationArgs(
        schema_path=resolve_schema_path(argv),
        model_path=resolve_model_path(argv),
        product_info_path=resolve_product_info_path(argv),
    )
    logger.debug(f"Resolved invocation arguments: {args.model_dump()}")
    return args
