"""
Time log parsing and grouping.

A time log is a markdown document in which level-agnostic headings carry a
date and the lists below them carry one entry per item::

    ## 2024-02-13
    * 9-10 ABC
    * 10:00 - 11:30: "Some project" with notes

Anything the parser cannot interpret is skipped; it never fails on content.
"""
import datetime
import re
import typing
from dataclasses import dataclass

from .document import MarkdownReader, Node, NodeKind
from .entry import Entry, EntryError, EntryGrammar, Rejection


DATE_PATTERN = re.compile(r'\b\d{4}-\d{2}-\d{2}\b')


def parse_heading(text: str) -> typing.Optional[datetime.date]:
    match = DATE_PATTERN.search(text)
    if match is None:
        return None
    try:
        return datetime.datetime.strptime(match.group(0), '%Y-%m-%d').date()
    except ValueError:
        return None


class Log:

    def __init__(self, entries: typing.Iterable[Entry] = ()):
        self._entries = tuple(sorted(entries))

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __eq__(self, other):
        if not isinstance(other, Log):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return f'Log({list(self._entries)!r})'

    def by_date(self) -> typing.Dict[datetime.date, 'Log']:
        return self._group(lambda entry: entry.date)

    def by_project(self) -> typing.Dict[str, 'Log']:
        return self._group(lambda entry: entry.project)

    def sum_duration(self) -> datetime.timedelta:
        return sum((entry.duration for entry in self._entries), datetime.timedelta())

    def _group(self, key: typing.Callable[[Entry], typing.Any]) -> dict:
        groups = {}
        for entry in self._entries:
            groups.setdefault(key(entry), []).append(entry)
        return {group: Log(entries) for group, entries in sorted(groups.items())}

    @classmethod
    def parse(cls, text: str) -> 'Log':
        return LogParser().parse(text)


@dataclass(frozen=True)
class RejectedLine:
    date: datetime.date
    text: str
    reason: Rejection


class LogParser:

    def __init__(self, grammar: EntryGrammar = None, reader: MarkdownReader = None):
        self._grammar = grammar or EntryGrammar()
        self._reader = reader or MarkdownReader()
        self._rejected = []

    @property
    def rejected(self) -> typing.List[RejectedLine]:
        return list(self._rejected)

    def parse(self, text: str) -> Log:
        self._rejected = []
        document = self._reader.read(text)
        date = None
        entries = []
        for node in document.children:
            if node.kind == NodeKind.HEADING:
                date = parse_heading(node.text)
            elif node.kind == NodeKind.LIST and date is not None:
                entries.extend(self._parse_list(node, date))
        return Log(entries)

    def _parse_list(self, node: Node, date: datetime.date) -> typing.Iterator[Entry]:
        for item in node.children:
            if not item.children:
                continue
            line = item.children[0].first_line
            try:
                yield self._grammar.check(line, date)
            except EntryError as e:
                self._rejected.append(RejectedLine(date, e.text, e.reason))
