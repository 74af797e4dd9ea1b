"""Interface of the external validator collaborator and its discovery.

The validator itself (schema parsing, model parsing, verdicts) lives in a
separate library. This module only describes the surface the CLI uses and
locates a factory for it.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from importlib.metadata import EntryPoint, entry_points
from typing import Any, Protocol

from commerce_validator_cli.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "commerce_validator.validators"


class FileSystemLoader(Protocol):
    def load_from_file_system(self, path: str) -> Awaitable[None] | None: ...


class ValidatorReport(Protocol):
    def get_items(self) -> Iterable[Any]: ...


class Validator(Protocol):
    version: str
    decimal_display_precision: int
    schema: FileSystemLoader
    model: FileSystemLoader
    product_info: FileSystemLoader
    report: ValidatorReport

    def generate_report(self) -> None: ...


ValidatorFactory = Callable[[], Validator]


async def load_from_file_system(loader: FileSystemLoader, path: str) -> None:
    """Call a loader, awaiting the result when the collaborator is async."""
    result = loader.load_from_file_system(path)
    if inspect.isawaitable(result):
        await result


def load_validator_factory(reference: str | None = None) -> ValidatorFactory:
    """
    Locate the validator factory.

    Args:
        reference: Import reference in entry-point syntax ("pkg.module:attr").
            When omitted, the first installed plugin registered under the
            ``commerce_validator.validators`` entry-point group is used.

    Returns:
        ValidatorFactory: Zero-argument callable producing a validator.

    Raises:
        ConfigurationError: If no validator is configured or it cannot be loaded.
    """
    if reference:
        entry_point = EntryPoint(
            name="configured", value=reference, group=ENTRY_POINT_GROUP
        )
    else:
        discovered = sorted(
            entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name
        )
        if not discovered:
            raise ConfigurationError(
                "No validator configured: pass --validator or set COMMERCE_VALIDATOR"
            )
        entry_point = discovered[0]
        if len(discovered) > 1:
            logger.warning(
                f"Multiple validators installed, using '{entry_point.name}' "
                f"({entry_point.value})"
            )

    logger.debug(f"Loading validator factory: {entry_point.value}")
    try:
        factory = entry_point.load()
    except Exception as exc:
        raise ConfigurationError(
            f"Could not load validator '{entry_point.value}': {exc}"
        ) from exc

    if not callable(factory):
        raise ConfigurationError(f"Validator '{entry_point.value}' is not callable")
    return factory
