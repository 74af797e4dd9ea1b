from enum import StrEnum


class ItemStatus(StrEnum):
    PASS = "PASS"
    FAIL = "FAIL"
    NOT_TESTED = "NOT TESTED"


class TextColor(StrEnum):
    SUCCESS = "green"
    FAILURE = "red"
    NEUTRAL = "bright_black"
    INFO = "yellow"
    BANNER = "magenta"


_STATUS_COLORS: dict[ItemStatus, TextColor] = {
    ItemStatus.PASS: TextColor.SUCCESS,
    ItemStatus.FAIL: TextColor.FAILURE,
    ItemStatus.NOT_TESTED: TextColor.NEUTRAL,
}


def get_status(tested: bool, passed: bool) -> ItemStatus:
    """
    Map the tested/pass flags of a report item to its status token.

    Args:
        tested: Whether the collaborator ran the check at all.
        passed: Whether the check passed. Ignored when not tested.

    Returns:
        ItemStatus enum value.
    """
    if not tested:
        return ItemStatus.NOT_TESTED
    return ItemStatus.PASS if passed else ItemStatus.FAIL


def get_status_color(status: ItemStatus) -> TextColor:
    """Get the console color used for a status token."""
    return _STATUS_COLORS[status]
