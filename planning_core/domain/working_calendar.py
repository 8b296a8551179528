# planning_core/domain/working_calendar.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import FrozenSet, Iterable, List

from dateutil.rrule import DAILY, FR, MO, TH, TU, WE, rrule, rruleset

WEEKDAYS = (MO, TU, WE, TH, FR)


@dataclass(frozen=True)
class WorkingCalendar:
    """Weekdays (Mon-Fri) minus an optional set of holidays"""
    holidays: FrozenSet[date] = frozenset()

    @classmethod
    def with_holidays(cls, holidays: Iterable[date]) -> "WorkingCalendar":
        return cls(holidays=frozenset(holidays))

    def working_days(self, start: date, end: date) -> List[date]:
        """Ordered working dates in [start, end]; empty for an inverted range."""
        if start is None or end is None or end < start:
            return []

        rules = rruleset()
        rules.rrule(rrule(
            DAILY,
            dtstart=datetime.combine(start, time()),
            until=datetime.combine(end, time()),
            byweekday=WEEKDAYS,
        ))
        for holiday in self.holidays:
            rules.exdate(datetime.combine(holiday, time()))
        return [dt.date() for dt in rules]

    def count_working_days(self, start: date, end: date) -> int:
        return len(self.working_days(start, end))


DEFAULT_CALENDAR = WorkingCalendar()
