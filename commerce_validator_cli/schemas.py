"""Pydantic schemas for invocation arguments and validation reports."""

from collections.abc import Iterable
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from commerce_validator_cli.models import ItemStatus, get_status


class InvocationArgs(BaseModel):
    """Resolved file paths for a single run."""

    model_config = ConfigDict(frozen=True)

    schema_path: str
    model_path: str
    product_info_path: str = Field(
        default="", description="Empty when no product info file was given"
    )

    @property
    def has_product_info(self) -> bool:
        return bool(self.product_info_path)


class ReportItem(BaseModel):
    """One named check result produced by the validator."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    name: str
    tested: bool
    passed: bool = Field(
        default=False,
        validation_alias=AliasChoices("passed", "pass"),
        description="Meaningful only when tested",
    )
    message: str = ""

    @property
    def status(self) -> ItemStatus:
        return get_status(self.tested, self.passed)


class Report(BaseModel):
    """Ordered, fully materialized list of report items."""

    model_config = ConfigDict(frozen=True)

    items: tuple[ReportItem, ...] = ()

    @classmethod
    def from_items(cls, items: Iterable[Any]) -> "Report":
        """
        Build a report from collaborator items, keeping their order.

        Args:
            items: Mappings or objects exposing name/tested/pass/message.

        Returns:
            Report: Immutable report.
        """
        return cls(items=tuple(ReportItem.model_validate(item) for item in items))

    @property
    def longest_name_length(self) -> int:
        return max((len(item.name) for item in self.items), default=0)

    @property
    def has_untested(self) -> bool:
        return any(not item.tested for item in self.items)
