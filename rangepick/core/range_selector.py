"""Click/hover state machine for picking a start and end day.

The state is implicit in the shape of the range:

- Empty: no start, no end
- PartialStart: start only, waiting for the second click
- Complete: both bounds set

Every transition returns a new PickerSelectionState; nothing is mutated in
place. Moving from PartialStart to Complete is the only event reported to
subscribers.
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from .models import DateRange, EMPTY_RANGE, PickerSelectionState

logger = logging.getLogger(__name__)

CommitListener = Callable[[DateRange], None]
CommitPolicy = Callable[[DateRange], DateRange]


def click(state: PickerSelectionState, day: date) -> PickerSelectionState:
    """Apply a day click to ``state`` and return the next state."""
    rng = state.range
    if not rng.is_partial:
        # Empty or Complete: start a fresh selection, dropping any old range
        return PickerSelectionState(range=DateRange(start=day), hover=None)
    if day >= rng.start:
        return PickerSelectionState(range=DateRange(start=rng.start, end=day))
    return PickerSelectionState(range=DateRange(start=day, end=rng.start))


def hover(state: PickerSelectionState, day: date) -> PickerSelectionState:
    """Record ``day`` as hovered while a start is open; no-op otherwise."""
    if not state.range.is_partial:
        return state
    return PickerSelectionState(range=state.range, hover=day)


def leave(state: PickerSelectionState) -> PickerSelectionState:
    return PickerSelectionState(range=state.range, hover=None)


class RangeSelector:
    """Owns the selection state and notifies listeners when a range is committed."""

    def __init__(self, initial_range: Optional[DateRange] = None,
                 commit_policy: Optional[CommitPolicy] = None):
        """Initialize a RangeSelector.

        Args:
            initial_range: Range to start from (optional, defaults to empty)
            commit_policy: Post-processing applied to a freshly completed range
                before it is stored and reported (optional)
        """
        self._state = PickerSelectionState(range=initial_range or EMPTY_RANGE)
        self._commit_policy = commit_policy
        self._listeners: List[CommitListener] = []

    @property
    def state(self) -> PickerSelectionState:
        return self._state

    @property
    def range(self) -> DateRange:
        return self._state.range

    @property
    def hover(self) -> Optional[date]:
        return self._state.hover

    def subscribe(self, listener: CommitListener) -> Callable[[], None]:
        """Register a commit listener.

        Args:
            listener: Called with the committed DateRange

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_day_click(self, day: date) -> PickerSelectionState:
        """Handle a click on ``day``.

        Returns:
            The new selection state
        """
        was_partial = self._state.range.is_partial
        new_state = click(self._state, day)
        committed = was_partial and new_state.range.is_complete
        if committed and self._commit_policy is not None:
            new_state = PickerSelectionState(range=self._commit_policy(new_state.range),
                                             hover=new_state.hover)
        self._state = new_state
        if committed:
            logger.debug("Range committed: %s to %s", new_state.range.start, new_state.range.end)
            self._notify(new_state.range)
        else:
            logger.debug("Range started at %s", day)
        return self._state

    def on_day_hover(self, day: date) -> PickerSelectionState:
        self._state = hover(self._state, day)
        return self._state

    def on_hover_leave(self) -> PickerSelectionState:
        self._state = leave(self._state)
        return self._state

    def on_clear(self) -> PickerSelectionState:
        """Drop the range and hover regardless of the current state."""
        self._state = PickerSelectionState()
        logger.debug("Selection cleared")
        return self._state

    def _notify(self, committed: DateRange) -> None:
        for listener in list(self._listeners):
            listener(committed)
