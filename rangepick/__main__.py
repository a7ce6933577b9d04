"""Main module for the rangepick package."""
import sys
import logging
import argparse
from datetime import date
from typing import Callable, List, Optional

from .core.errors import RangePickError
from .core.models import DateRange, QuickJumpMode, WeekStart
from .core.picker import DateRangePicker
from .reports.calendar_report import CalendarReport
from .utils.config import PickerConfig, load_environment
from .utils.date_utils import parse_day, parse_month, day_str
from .utils.file_utils import write_markdown
from .utils.format_utils import format_display_text

HELP_TEXT = """Commands:
  click YYYY-MM-DD     click a day
  hover YYYY-MM-DD     hover a day
  leave                clear the hover
  clear                clear the selection
  next / prev          move one month
  next-year / prev-year
  today                show the current month
  toggle month|year    open or close a quick-jump picker
  month N              pick month N (1-12)
  year N               pick year N
  show                 render the calendar
  help                 show this help
  quit                 leave interactive mode"""

# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (optional, defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Pick a date range across several calendar months.",
        epilog="""
Examples:
    # Show the next three months with ISO-style Monday weeks and week numbers
  rangepick --months 3 --weekstart mon --week-numbers
    ---
    # Replay two clicks and a hover, then render
  rangepick --anchor 2024-03 --click 2024-03-10 --click 2024-03-15
    ---
    # Export the rendered months to markdown and the cells to CSV
  rangepick --start 2024-03-10 --end 2024-03-15 --md march.md --csv march
    ---
    # Drive the picker from the keyboard
  rangepick --interactive
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="rangepick"
    )
    parser.add_argument('--start', help='Initial range start (YYYY-MM-DD)')
    parser.add_argument('--end', help='Initial range end (YYYY-MM-DD), needs --start')
    parser.add_argument('--anchor', help='First displayed month (YYYY-MM)')
    parser.add_argument('--months', type=int, help='Number of months to display (default: 2 or RANGEPICK_NUMBER_OF_MONTHS)')
    parser.add_argument('--weekstart', help='First day of the week: 0=Mon .. 6=Sun or a weekday name (default: Sunday)')
    parser.add_argument('--week-numbers', dest='week_numbers', action='store_true', default=None, help='Show week numbers')
    parser.add_argument('--highlight-week', dest='highlight_week', action='store_true', default=None, help='Preview whole weeks on hover')
    parser.add_argument('--snap-weeks', dest='snap_weeks', action='store_true', default=None, help='Snap committed ranges to whole weeks')
    parser.add_argument('--click', action='append', default=[], help='Click a day (YYYY-MM-DD), may be repeated')
    parser.add_argument('--hover', help='Hover a day (YYYY-MM-DD) after the clicks')
    parser.add_argument('--today', help='Override the current date (YYYY-MM-DD)')
    parser.add_argument('--csv', help='Export visible cells to CSV (provide filename prefix)')
    parser.add_argument('--md', help='Export output as markdown to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Explicitly overwrite the markdown file if it exists (DANGEROUS)')
    parser.add_argument('--interactive', action='store_true', help='Read picker commands from stdin')
    parser.add_argument('--verbose', action='store_true', help='Log picker state transitions')
    return parser.parse_args(argv)

def build_config(args: argparse.Namespace, environ=None) -> PickerConfig:
    """Combine RANGEPICK_* environment settings with command line overrides.

    Args:
        args: Parsed arguments
        environ: Environment mapping (optional, defaults to os.environ)

    Returns:
        Effective picker configuration
    """
    config = PickerConfig.from_env(environ)
    return config.override(
        week_start=WeekStart.parse(args.weekstart) if args.weekstart is not None else None,
        number_of_months=args.months,
        show_week_numbers=args.week_numbers,
        highlight_full_week_on_hover=args.highlight_week,
        default_to_week_start_and_end_dates=args.snap_weeks,
    )

def build_picker(args: argparse.Namespace, environ=None,
                 on_commit: Optional[Callable[[DateRange], None]] = None) -> DateRangePicker:
    """Create a picker from parsed arguments and replay the scripted events.

    Args:
        args: Parsed arguments
        environ: Environment mapping (optional)
        on_commit: Listener for committed ranges (optional)

    Returns:
        DateRangePicker after the --click/--hover events
    """
    config = build_config(args, environ)
    start = parse_day(args.start) if args.start else None
    end = parse_day(args.end) if args.end else None
    today = parse_day(args.today) if args.today else None

    picker = DateRangePicker(initial_range=DateRange(start=start, end=end), today=today,
                             on_range_committed=on_commit, **config.to_picker_kwargs())
    if args.anchor:
        anchor = parse_month(args.anchor)
        picker.on_pick_year(anchor.year)
        picker.on_pick_month(anchor.month)
    for text in args.click:
        picker.on_day_click(parse_day(text))
    if args.hover:
        picker.on_day_hover(parse_day(args.hover))
    return picker

def render(picker: DateRangePicker, csv_prefix: Optional[str] = None, today: Optional[date] = None) -> str:
    """Render every displayed month of ``picker`` as text tables.

    Args:
        picker: Picker to render
        csv_prefix: Prefix for CSV export (optional)
        today: Current date (optional)

    Returns:
        Rendered report
    """
    report = CalendarReport(
        picker.get_visible_grids(today), picker.selection, picker.weekday_labels(),
        show_week_numbers=picker.show_week_numbers, header=picker.header_text(),
    )
    return report.generate_report(csv_prefix)

def print_commit(rng: DateRange) -> None:
    print(f"[INFO] Range committed: {day_str(rng.start)} to {day_str(rng.end)}")

def apply_command(picker: DateRangePicker, line: str) -> str:
    """Apply one interactive command to ``picker``.

    Args:
        picker: Picker to drive
        line: Command line, e.g. "click 2024-03-10"

    Returns:
        A short status message ("quit" ends the session)
    """
    parts = line.strip().split()
    if not parts:
        return ""
    cmd, params = parts[0].lower(), parts[1:]
    try:
        if cmd in ('quit', 'exit', 'q'):
            return "quit"
        if cmd == 'help':
            return HELP_TEXT
        if cmd == 'show':
            return render(picker)
        if cmd in ('click', 'hover') and len(params) == 1:
            day = parse_day(params[0])
            if cmd == 'hover':
                picker.on_day_hover(day)
            if not picker.is_selectable(day):
                return f"{day} is not in a displayed month"
            if cmd == 'click':
                picker.on_day_click(day)
            return format_display_text(picker.range)
        if cmd == 'leave':
            picker.on_hover_leave()
            return "hover cleared"
        if cmd == 'clear':
            picker.on_clear()
            return format_display_text(picker.range)
        if cmd in ('next', 'prev', 'next-year', 'prev-year', 'today'):
            handlers = {
                'next': picker.on_next_month,
                'prev': picker.on_prev_month,
                'next-year': picker.on_next_year,
                'prev-year': picker.on_prev_year,
                'today': picker.on_today,
            }
            handlers[cmd]()
            return picker.header_text()
        if cmd == 'toggle' and len(params) == 1:
            state = picker.on_toggle_quick_jump(QuickJumpMode(params[0].lower()))
            return _describe_quick_jump(picker, state.quick_jump_mode)
        if cmd == 'month' and len(params) == 1:
            picker.on_pick_month(int(params[0]))
            return picker.header_text()
        if cmd == 'year' and len(params) == 1:
            state = picker.on_pick_year(int(params[0]))
            return f"{picker.header_text()} | {_describe_quick_jump(picker, state.quick_jump_mode)}"
    except (ValueError, RangePickError) as e:
        return f"[ERROR] {e}"
    return f"Unknown command: {line.strip()} (type 'help')"

def _describe_quick_jump(picker: DateRangePicker, mode: QuickJumpMode) -> str:
    if mode is QuickJumpMode.MONTH:
        return "pick a month: " + " ".join(f"{d.month}={d:%b}" for d in picker.month_choices())
    if mode is QuickJumpMode.YEAR:
        return "pick a year: " + " ".join(str(y) for y in picker.year_choices())
    return "quick jump closed"

def interactive_loop(picker: DateRangePicker, input_func: Callable[[str], str] = input) -> None:
    """Read commands until "quit" or end of input, printing each result.

    The calendar is rendered again after every command that changes the
    selection or the displayed months.

    Args:
        picker: Picker to drive
        input_func: Prompt function (optional, defaults to input)
    """
    print(render(picker))
    while True:
        try:
            line = input_func("rangepick> ")
        except EOFError:
            break
        before = (picker.selection, picker.nav_state)
        result = apply_command(picker, line)
        if result == "quit":
            break
        if result:
            print(result)
        if (picker.selection, picker.nav_state) != before:
            print(render(picker))

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    load_environment()
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        picker = build_picker(args, on_commit=print_commit)
    except (ValueError, RangePickError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    if args.interactive:
        interactive_loop(picker)
        return

    report = render(picker, args.csv)
    if args.md:
        write_markdown(args.md, f"\n{report}\n", f"Date range: {format_display_text(picker.range)}", args.overwrite)
        print(f"[SUCCESS] Markdown output written to '{args.md}'")
    else:
        print(report)

if __name__ == "__main__":
    main()
