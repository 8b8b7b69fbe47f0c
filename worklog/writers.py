import datetime
import typing

from openpyxl.workbook import Workbook

from .common import CsvWriter, hours
from .model.entry import Entry
from .model.excel import DailySheet, EntriesSheet, ProjectsSheet


class EntryCsvWriter(CsvWriter):

    def __init__(self, filepath):
        super().__init__(filepath, header=[
            'date',
            'from',
            'until',
            'project',
            'hours',
            'notes'
        ])

    def write(self, entry: Entry):
        super().write([
            entry.date.strftime('%Y-%m-%d'),
            entry.start.strftime('%H:%M'),
            entry.end.strftime('%H:%M'),
            entry.project,
            f'{hours(entry.duration)}',
            entry.notes or ''
        ])


class DurationCsvWriter(CsvWriter):

    def __init__(self, filepath, key: str, key_format: typing.Callable[[typing.Any], str] = str):
        super().__init__(filepath, header=[
            key,
            'hours'
        ])
        self._key_format = key_format

    def write(self, pair: typing.Tuple[typing.Any, datetime.timedelta]):
        key, duration = pair
        super().write([
            self._key_format(key),
            f'{hours(duration)}'
        ])


class DailyCsvWriter(DurationCsvWriter):

    def __init__(self, filepath):
        super().__init__(filepath, 'day', lambda date: date.strftime('%Y-%m-%d'))


class ProjectCsvWriter(DurationCsvWriter):

    def __init__(self, filepath):
        super().__init__(filepath, 'project')


class SummaryWorkbookWriter:

    def __init__(self, path):
        self._path = path

    def __enter__(self):
        self._workbook = Workbook()
        self._daily = DailySheet(self._workbook.active)
        self._projects = ProjectsSheet(self._workbook.create_sheet())
        self._entries = EntriesSheet(self._workbook.create_sheet())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._daily.close()
            self._projects.close()
            self._workbook.save(filename=self._path)

    def write_day(self, date: datetime.date, duration: datetime.timedelta):
        self._daily.append(date, duration)

    def write_project(self, project: str, duration: datetime.timedelta):
        self._projects.append(project, duration)

    def write_entry(self, entry: Entry):
        self._entries.append(entry)
