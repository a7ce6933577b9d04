import sys
import os
import unittest
from datetime import date

# Add the parent directory to sys.path to import the rangepick package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from rangepick.core.grid_builder import build_grid, build_month, preview_interval
from rangepick.core.models import DateRange, MonthView, PickerSelectionState, WeekStart

TODAY = date(2024, 3, 15)

def cells_of(rows):
    return [cell for row in rows for cell in row.cells]

class TestGridLayout(unittest.TestCase):
    """Test how a month is laid out into week rows."""
    
    def test_march_2024_monday(self):
        """Test the Monday-start March 2024 grid: Feb 26 to Mar 31, 35 cells."""
        rows = build_grid(date(2024, 3, 1), WeekStart.MONDAY, PickerSelectionState(), TODAY)
        cells = cells_of(rows)
        
        self.assertEqual(len(rows), 5)
        self.assertEqual(len(cells), 35)
        self.assertEqual(cells[0].date, date(2024, 2, 26))
        self.assertEqual(cells[-1].date, date(2024, 3, 31))
        
        outside = [c.date for c in cells if not c.in_current_month]
        self.assertEqual(outside, [date(2024, 2, 26), date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29)])
        self.assertEqual(sum(1 for c in cells if c.in_current_month), 31)
    
    def test_rows_have_seven_days_starting_on_week_start(self):
        """Test every month of 2024 under every week-start convention."""
        for week_start in WeekStart:
            for month in range(1, 13):
                with self.subTest(week_start=week_start, month=month):
                    rows = build_grid(date(2024, month, 1), week_start, PickerSelectionState(), TODAY)
                    self.assertEqual(rows[0].cells[0].date.weekday(), int(week_start))
                    for row in rows:
                        self.assertEqual(len(row.cells), 7)
                    cells = cells_of(rows)
                    for prev, cur in zip(cells, cells[1:]):
                        self.assertEqual((cur.date - prev.date).days, 1)
    
    def test_row_counts(self):
        """Test four-, five- and six-row months."""
        test_cases = [
            (date(2015, 2, 1), WeekStart.SUNDAY, 4),
            (date(2024, 3, 1), WeekStart.MONDAY, 5),
            (date(2024, 3, 1), WeekStart.SUNDAY, 6),
        ]
        for anchor, week_start, expected in test_cases:
            with self.subTest(anchor=anchor, week_start=week_start):
                rows = build_grid(anchor, week_start, PickerSelectionState(), TODAY)
                self.assertEqual(len(rows), expected)
    
    def test_anchor_may_be_any_day_of_month(self):
        a = build_grid(date(2024, 3, 1), WeekStart.MONDAY, PickerSelectionState(), TODAY)
        b = build_grid(date(2024, 3, 20), WeekStart.MONDAY, PickerSelectionState(), TODAY)
        self.assertEqual(a, b)
    
    def test_week_numbers_label_first_cell(self):
        """Test that each row is labelled with the week number of its first day."""
        rows = build_grid(date(2024, 3, 1), WeekStart.MONDAY, PickerSelectionState(), TODAY)
        self.assertEqual([row.week_number for row in rows], [9, 10, 11, 12, 13])
    
    def test_build_month_hides_week_numbers(self):
        view = MonthView(anchor=date(2024, 3, 1))
        grid = build_month(view, WeekStart.MONDAY, PickerSelectionState(), TODAY, show_week_numbers=False)
        self.assertEqual(grid.view, view)
        self.assertTrue(all(row.week_number is None for row in grid.rows))
        self.assertEqual(len(grid.cells()), 35)
    
    def test_today_flag(self):
        cells = cells_of(build_grid(date(2024, 3, 1), WeekStart.MONDAY, PickerSelectionState(), TODAY))
        self.assertEqual([c.date for c in cells if c.is_today], [TODAY])
        
        other = cells_of(build_grid(date(2024, 5, 1), WeekStart.MONDAY, PickerSelectionState(), TODAY))
        self.assertFalse(any(c.is_today for c in other))

class TestGridSelectionFlags(unittest.TestCase):
    """Test range, bound and preview flags on the cells."""
    
    def flags(self, selection, week_start=WeekStart.MONDAY, full_weeks=False):
        rows = build_grid(date(2024, 3, 1), week_start, selection, TODAY, full_weeks)
        return {c.date: c for c in cells_of(rows)}
    
    def test_empty_selection_has_no_flags(self):
        cells = self.flags(PickerSelectionState())
        for cell in cells.values():
            self.assertFalse(cell.is_range_start or cell.is_range_end or cell.is_in_range or cell.is_in_preview)
    
    def test_complete_range(self):
        """Test bounds and inclusive in-range flags for a committed range."""
        selection = PickerSelectionState(range=DateRange(date(2024, 3, 10), date(2024, 3, 15)))
        cells = self.flags(selection)
        
        in_range = sorted(d for d, c in cells.items() if c.is_in_range)
        self.assertEqual(in_range[0], date(2024, 3, 10))
        self.assertEqual(in_range[-1], date(2024, 3, 15))
        self.assertEqual(len(in_range), 6)
        self.assertTrue(cells[date(2024, 3, 10)].is_range_start)
        self.assertFalse(cells[date(2024, 3, 10)].is_range_end)
        self.assertTrue(cells[date(2024, 3, 15)].is_range_end)
        self.assertFalse(any(c.is_in_preview for c in cells.values()))
    
    def test_single_day_range(self):
        day = date(2024, 3, 12)
        cells = self.flags(PickerSelectionState(range=DateRange(day, day)))
        self.assertTrue(cells[day].is_range_start)
        self.assertTrue(cells[day].is_range_end)
        self.assertEqual([d for d, c in cells.items() if c.is_in_range], [day])
    
    def test_range_flags_on_leading_days(self):
        """Test that out-of-month days still carry range flags."""
        selection = PickerSelectionState(range=DateRange(date(2024, 2, 28), date(2024, 3, 2)))
        cells = self.flags(selection)
        self.assertTrue(cells[date(2024, 2, 28)].is_range_start)
        self.assertFalse(cells[date(2024, 2, 28)].in_current_month)
        self.assertTrue(cells[date(2024, 2, 29)].is_in_range)
        self.assertFalse(cells[date(2024, 2, 27)].is_in_range)
    
    def test_preview_forward_hover(self):
        """Test that a hover after the start previews [start, hover]."""
        selection = PickerSelectionState(range=DateRange(date(2024, 3, 10)), hover=date(2024, 3, 12))
        cells = self.flags(selection)
        preview = sorted(d for d, c in cells.items() if c.is_in_preview)
        self.assertEqual(preview, [date(2024, 3, 10), date(2024, 3, 11), date(2024, 3, 12)])
        self.assertTrue(cells[date(2024, 3, 10)].is_range_start)
        self.assertFalse(any(c.is_in_range for c in cells.values()))
    
    def test_preview_rejected_for_earlier_or_equal_hover(self):
        """Test that hovering on or before the start shows no preview."""
        for hover in (date(2024, 3, 5), date(2024, 3, 10)):
            with self.subTest(hover=hover):
                selection = PickerSelectionState(range=DateRange(date(2024, 3, 10)), hover=hover)
                cells = self.flags(selection)
                self.assertFalse(any(c.is_in_preview for c in cells.values()))
    
    def test_no_preview_once_committed(self):
        selection = PickerSelectionState(range=DateRange(date(2024, 3, 10), date(2024, 3, 15)),
                                         hover=date(2024, 3, 20))
        cells = self.flags(selection)
        self.assertFalse(any(c.is_in_preview for c in cells.values()))
    
    def test_full_week_preview(self):
        """Test that whole-week preview spans from the start's week to the hover's week."""
        selection = PickerSelectionState(range=DateRange(date(2024, 3, 13)), hover=date(2024, 3, 19))
        cells = self.flags(selection, full_weeks=True)
        preview = sorted(d for d, c in cells.items() if c.is_in_preview)
        self.assertEqual(preview[0], date(2024, 3, 11))
        self.assertEqual(preview[-1], date(2024, 3, 24))
        self.assertEqual(len(preview), 14)
    
    def test_preview_interval(self):
        partial = PickerSelectionState(range=DateRange(date(2024, 3, 13)), hover=date(2024, 3, 19))
        self.assertEqual(preview_interval(partial, WeekStart.MONDAY), (date(2024, 3, 13), date(2024, 3, 19)))
        self.assertEqual(preview_interval(partial, WeekStart.SUNDAY, full_weeks=True),
                         (date(2024, 3, 10), date(2024, 3, 23)))
        self.assertIsNone(preview_interval(PickerSelectionState(range=DateRange(date(2024, 3, 13))), WeekStart.MONDAY))

if __name__ == '__main__':
    unittest.main()
