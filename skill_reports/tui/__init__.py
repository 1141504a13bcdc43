from skill_reports.tui.renderers import ReportConsoleUI

__all__ = ["ReportConsoleUI"]
