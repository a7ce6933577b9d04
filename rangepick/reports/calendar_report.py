"""CalendarReport class for rendering visible month grids as text tables."""
import csv
from typing import List, Optional
from tabulate import tabulate
from io import StringIO

from ..core.models import MonthGrid, PickerSelectionState
from ..utils.format_utils import format_cell, format_display_text, format_month, format_range_summary

CSV_HEADERS = ["Month", "Date", "Week", "InMonth", "Today", "Start", "End", "InRange", "Preview"]

class CalendarReport:
    """Class for rendering month grids and the current selection."""
    
    def __init__(self, grids: List[MonthGrid], selection: PickerSelectionState,
                 weekday_labels: List[str], show_week_numbers: bool = False, header: str = ""):
        """Initialize a CalendarReport.
        
        Args:
            grids: Month grids to render, in display order
            selection: Selection the grids were built from
            weekday_labels: Column headers, already rotated to the week start
            show_week_numbers: Whether to add a "#" week-number column
            header: Navigation header line (optional)
        """
        self.grids = grids
        self.selection = selection
        self.weekday_labels = weekday_labels
        self.show_week_numbers = show_week_numbers
        self.header = header
    
    def generate_report(self, csv_prefix: Optional[str] = None) -> str:
        """Generate the report.
        
        Args:
            csv_prefix: Prefix for the CSV cell export (optional)
            
        Returns:
            Report as a string
        """
        output = StringIO()
        
        if self.header:
            print(f"\n## {self.header}", file=output)
        for grid in self.grids:
            self._generate_month_table(output, grid)
        self._generate_selection_footer(output)
        
        if csv_prefix:
            self.write_csv(f"{csv_prefix}_cells.csv")
        
        return output.getvalue()
    
    def month_rows(self, grid: MonthGrid) -> List[list]:
        """Build the table rows of one month, one list per week."""
        rows = []
        for week in grid.rows:
            row = [format_cell(cell) for cell in week.cells]
            if self.show_week_numbers:
                row.insert(0, "" if week.week_number is None else week.week_number)
            rows.append(row)
        return rows
    
    def cell_rows(self) -> List[list]:
        """Flatten every visible cell into CSV rows."""
        rows = []
        for grid in self.grids:
            month_label = f"{grid.view.year:04d}-{grid.view.month:02d}"
            for week in grid.rows:
                for cell in week.cells:
                    rows.append([
                        month_label, cell.date.isoformat(),
                        "" if week.week_number is None else week.week_number,
                        int(cell.in_current_month), int(cell.is_today),
                        int(cell.is_range_start), int(cell.is_range_end),
                        int(cell.is_in_range), int(cell.is_in_preview),
                    ])
        return rows
    
    def write_csv(self, filename: str) -> int:
        """Export every visible cell with its flags.
        
        Args:
            filename: Output CSV path
            
        Returns:
            Number of cell rows written
        """
        rows = self.cell_rows()
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)
            writer.writerows(rows)
        return len(rows)
    
    def _generate_month_table(self, output: StringIO, grid: MonthGrid):
        """Generate the table for one month.
        
        Args:
            output: StringIO to write to
            grid: Month grid to render
        """
        headers = list(self.weekday_labels)
        if self.show_week_numbers:
            headers.insert(0, "#")
        
        print(f"\n### {format_month(grid.view, full=True)}", file=output)
        print(tabulate(self.month_rows(grid), headers=headers, tablefmt="github", stralign="right"), file=output)
    
    def _generate_selection_footer(self, output: StringIO):
        rng = self.selection.range
        print(f"\nSelection: {format_display_text(rng)}", file=output)
        summary = format_range_summary(rng)
        if summary:
            print(summary, file=output)
        print(file=output)  # Extra newline
