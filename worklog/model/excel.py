import datetime

from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.styles.colors import Color

from ..common import hours


class BaseSheet:

    _title = ''
    _header = None
    _header_font = Font(color='FF000000', bold=True)
    _header_fill = PatternFill("solid", fgColor=Color(indexed=22))
    _columns_width = None
    _hours_format = '0.00'

    def __init__(self, sheet, title: str = None):
        self._sheet = sheet
        sheet.title = title or self._title
        for cell, cell_title in (self._header or {}).items():
            self.set_value(cell, cell_title, font=self._header_font, fill=self._header_fill)
        for column, width in (self._columns_width or {}).items():
            sheet.column_dimensions[column].width = width
        self._row = 2

    def set_value(self, cell, value, font=None, fill=None, wrap=False):
        self._sheet[cell] = value
        if font:
            self[cell].font = font
        if fill:
            self[cell].fill = fill
        if wrap:
            self[cell].alignment = Alignment(wrap_text=True)

    def set_hours(self, cell, duration: datetime.timedelta):
        self._sheet[cell] = float(hours(duration))
        self[cell].number_format = self._hours_format

    def __setitem__(self, key, value):
        self.set_value(key, value)

    def __getitem__(self, item):
        return self._sheet[item]


class DurationSheet(BaseSheet):
    """Two column sheet of labelled durations closed by a formula total."""

    _columns_width = {
        'A': 30,
        'B': 12,
    }

    def append(self, label, duration: datetime.timedelta):
        self[f'A{self._row}'] = label
        self.set_hours(f'B{self._row}', duration)
        self._row += 1

    def close(self):
        last = self._row - 1
        self.set_value(f'A{self._row}', 'Total', font=self._header_font)
        self[f'B{self._row}'] = f'=SUM(B2:B{last})' if last >= 2 else 0
        self[f'B{self._row}'].number_format = self._hours_format


class DailySheet(DurationSheet):

    _title = 'Daily'
    _header = {
        'A1': 'Date',
        'B1': 'Hours',
    }

    def append(self, date: datetime.date, duration: datetime.timedelta):
        super().append(date, duration)
        self[f'A{self._row - 1}'].number_format = 'yyyy-mm-dd'


class ProjectsSheet(DurationSheet):

    _title = 'Projects'
    _header = {
        'A1': 'Project',
        'B1': 'Hours',
    }


class EntriesSheet(BaseSheet):

    _title = 'Entries'
    _header = {
        'A1': 'Date',
        'B1': 'From',
        'C1': 'Until',
        'D1': 'Project',
        'E1': 'Hours',
        'F1': 'Notes',
    }
    _columns_width = {
        'A': 12,
        'B': 8,
        'C': 8,
        'D': 30,
        'E': 10,
        'F': 50,
    }

    def append(self, entry):
        row = self._row
        self[f'A{row}'] = entry.date
        self[f'A{row}'].number_format = 'yyyy-mm-dd'
        self[f'B{row}'] = entry.start.strftime('%H:%M')
        self[f'C{row}'] = entry.end.strftime('%H:%M')
        self[f'D{row}'] = entry.project
        self.set_hours(f'E{row}', entry.duration)
        self.set_value(f'F{row}', entry.notes or '', wrap=True)
        self._row += 1
