from enum import Enum

from project_zipper.models import EntryOutcome


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


ENTRY_OUTCOME_STYLE = {
    EntryOutcome.ADDED: UIStyle.GREEN.value,
    EntryOutcome.HIDDEN: UIStyle.DIM.value,
    EntryOutcome.OUTPUT: UIStyle.DIM.value,
    EntryOutcome.DIRECTORY: UIStyle.DIM.value,
    EntryOutcome.MISSING: UIStyle.YELLOW.value,
    EntryOutcome.FAILED: UIStyle.RED.value,
}
