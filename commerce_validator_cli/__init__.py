from commerce_validator_cli.driver import run_validation, run_validation_async
from commerce_validator_cli.report import format_report, print_report
from commerce_validator_cli.schemas import InvocationArgs, Report, ReportItem

__all__ = [
    "run_validation",
    "run_validation_async",
    "format_report",
    "print_report",
    "InvocationArgs",
    "Report",
    "ReportItem",
]
