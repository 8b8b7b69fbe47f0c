import datetime
import enum
import functools
import re
import typing


ENTRY_PATTERN = r'''
    ^\s*
    (?P<from_h>[012]?\d)(?::?(?P<from_m>\d{2}))?
    (?:\s*-\s*|\s+)
    (?P<until_h>[012]?\d)(?::?(?P<until_m>\d{2}))?
    (?:\s*:\s*|\s+)
    (?:
        (?P<project>\w{3,})
        |"(?P<quoted_project>.+?)"
    )
    \s*(?P<notes>.+?)?\s*$
'''

BARE_PROJECT = re.compile(r'\w{3,}')


class Rejection(enum.Enum):
    MISMATCH = 'not a time log line'
    INVALID_TIME = 'time out of range'
    EMPTY_SPAN = 'start is not before end'


class EntryError(ValueError):

    def __init__(self, text: str, reason: Rejection):
        super().__init__(f'{reason.value}: {text!r}')
        self._text = text
        self._reason = reason

    @property
    def text(self) -> str:
        return self._text

    @property
    def reason(self) -> Rejection:
        return self._reason


@functools.total_ordering
class Entry:

    def __init__(self, start: datetime.datetime, end: datetime.datetime, project: str, notes: str = None):
        if start >= end:
            raise ValueError(f'entry start ({start:%Y-%m-%d %H:%M}) must be before its end ({end:%Y-%m-%d %H:%M})')
        if not project:
            raise ValueError('entry project cannot be empty')
        self._from = start
        self._until = end
        self._project = project
        self._notes = notes or None

    @property
    def start(self) -> datetime.datetime:
        return self._from

    @property
    def end(self) -> datetime.datetime:
        return self._until

    @property
    def date(self) -> datetime.date:
        return self._from.date()

    @property
    def project(self) -> str:
        return self._project

    @property
    def notes(self) -> typing.Optional[str]:
        return self._notes

    @property
    def duration(self) -> datetime.timedelta:
        return self._until - self._from

    def _key(self):
        return self._from, self._until, self._project

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f'Entry({self._from!r}, {self._until!r}, {self._project!r}, {self._notes!r})'

    def __str__(self):
        text = f'{self._from:%Y-%m-%d} | {self._from:%H:%M} - {self._until:%H:%M}: {self._project}'
        if self._notes:
            text += f' - {self._notes}'
        return text

    def to_line(self) -> str:
        """Time log line which parses back into an equal entry."""
        project = self._project
        if not BARE_PROJECT.fullmatch(project):
            project = f'"{project}"'
        line = f'{self._from:%H:%M}-{self._until:%H:%M} {project}'
        if self._notes:
            line += f' {self._notes}'
        return line


class EntryGrammar:

    def __init__(self, pattern: str = ENTRY_PATTERN):
        self._pattern = re.compile(pattern, re.VERBOSE)

    def parse(self, text: str, date: datetime.date) -> typing.Optional[Entry]:
        try:
            return self.check(text, date)
        except EntryError:
            return None

    def check(self, text: str, date: datetime.date) -> Entry:
        line = text.split('\n', 1)[0]
        match = self._pattern.match(line)
        if match is None:
            raise EntryError(line, Rejection.MISMATCH)
        try:
            start = datetime.datetime.combine(date, self._time(match, 'from_h', 'from_m'))
            end = datetime.datetime.combine(date, self._time(match, 'until_h', 'until_m'))
        except ValueError:
            raise EntryError(line, Rejection.INVALID_TIME)
        if start >= end:
            raise EntryError(line, Rejection.EMPTY_SPAN)
        project = match.group('project') or match.group('quoted_project')
        return Entry(start, end, project, match.group('notes'))

    @staticmethod
    def _time(match: re.Match, hour_group: str, minute_group: str) -> datetime.time:
        return datetime.time(int(match.group(hour_group)), int(match.group(minute_group) or 0))
