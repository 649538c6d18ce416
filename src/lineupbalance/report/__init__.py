from lineupbalance.report.printer import (
    ProgressPrinter,
    format_assignment,
    format_best_line,
    format_progress_line,
    print_result,
    render_lineup,
)

__all__ = [
    "ProgressPrinter",
    "format_assignment",
    "format_best_line",
    "format_progress_line",
    "print_result",
    "render_lineup",
]
