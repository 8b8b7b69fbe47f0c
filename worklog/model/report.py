import datetime
import enum
import typing

import click

from ..common import DaysRange, format_hours, pad_dates
from .timelog import Log


class Fill(enum.Enum):
    PADDED = 'padded'
    SPARSE = 'sparse'

    @classmethod
    def parse(cls, value) -> 'Fill':
        if isinstance(value, Fill):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f'unknown fill: {value}, please provide one of (padded, sparse)')


Pairs = typing.List[typing.Tuple[typing.Any, datetime.timedelta]]


def by_date(log: Log, fill: Fill = Fill.PADDED,
            dates_range: DaysRange = None) -> typing.List[typing.Tuple[datetime.date, datetime.timedelta]]:
    logs = log.by_date()
    if fill == Fill.PADDED or dates_range is not None:
        logs = pad_dates(logs, dates_range, default=Log)
    return [(date, day.sum_duration()) for date, day in logs.items()]


def by_project(log: Log) -> typing.List[typing.Tuple[str, datetime.timedelta]]:
    return [(project, entries.sum_duration()) for project, entries in log.by_project().items()]


def sum_durations(pairs: Pairs) -> datetime.timedelta:
    return sum((duration for _, duration in pairs), datetime.timedelta())


class Report:

    def __init__(self, title: str, entries: typing.Optional[Pairs] = None,
                 total: typing.Optional[datetime.timedelta] = None):
        self._title = title
        self._entries = entries
        self._total = total

    @property
    def title(self) -> str:
        return self._title

    @property
    def entries(self) -> typing.Optional[Pairs]:
        return self._entries

    @property
    def total(self) -> typing.Optional[datetime.timedelta]:
        return self._total

    def __eq__(self, other):
        if not isinstance(other, Report):
            return NotImplemented
        return (self.title, self.entries, self.total) == (other.title, other.entries, other.total)

    def __repr__(self):
        return f'Report({self._title!r}, {self._entries!r}, {self._total!r})'

    def text(self, color: bool = False) -> str:
        title = click.style(self._title, bold=True) if color else self._title
        if self._entries is None:
            return f'{title}: {format_hours(self._total or datetime.timedelta())}'
        lines = [title]
        lines.extend(f'{label}: {format_hours(duration)}' for label, duration in self._entries)
        if self._total is not None:
            lines.append(f'Total: {format_hours(self._total)}')
        return '\n'.join(lines)


def by_date_then_project(log: Log, fill: Fill = Fill.PADDED, dates_range: DaysRange = None) -> typing.List[Report]:
    days = log.by_date()
    if fill == Fill.PADDED or dates_range is not None:
        days = pad_dates(days, dates_range, default=Log)
    return [Report(date.isoformat(), by_project(day), day.sum_duration()) for date, day in days.items()]


def by_project_report(log: Log) -> Report:
    projects = by_project(log)
    return Report('Projects', projects, sum_durations(projects))


def total(log: Log) -> Report:
    return Report('Total', total=log.sum_duration())
