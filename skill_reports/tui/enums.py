from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


class ReportCheckStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


CHECK_STATUS_STYLE = {
    ReportCheckStatus.COMPLETE: UIStyle.GREEN.value,
    ReportCheckStatus.INCOMPLETE: UIStyle.RED.value,
}
