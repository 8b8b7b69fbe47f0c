import datetime
import textwrap

import pytest

from worklog.model.document import DocumentError
from worklog.model.entry import EntryGrammar, Rejection
from worklog.model.timelog import Log, LogParser, parse_heading


SAMPLE = textwrap.dedent("""\
    ## 2024-02-13
    * 9-10 ABC
    * 10-11 DEF
    * 11-12 ABC
    ## 2024-02-14
    * 9-10 ABC
    * 10-11 DEF
""")


def date(y: int, m: int, d: int) -> datetime.date:
    return datetime.date(y, m, d)


def entry(line: str, day: datetime.date):
    return EntryGrammar().parse(line, day)


def test_parse_scenario():
    log = Log.parse("## 2024-02-13\n* 9-10 ABC\n* 10-11 DEF\n* 11-12 ABC\n")
    assert len(log) == 3
    assert log.sum_duration() == datetime.timedelta(hours=3)
    assert {project: entries.sum_duration() for project, entries in log.by_project().items()} == {
        'ABC': datetime.timedelta(hours=2),
        'DEF': datetime.timedelta(hours=1),
    }


@pytest.mark.parametrize('text', [
    '',
    '* 9-10 ABC\n* 10-11 DEF\n',
    '# Time log\n\nNothing here yet.\n',
    '## 2024-02-13\n\nNo entries today.\n',
])
def test_parse_nothing(text):
    assert Log.parse(text) == Log()


def test_parse_sorts_entries():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-14
        * 10-11 DEF
        * 9-10 ABC
        ## 2024-02-13
        * 11-12 ABC
    """))
    assert list(log) == [
        entry('11-12 ABC', date(2024, 2, 13)),
        entry('9-10 ABC', date(2024, 2, 14)),
        entry('10-11 DEF', date(2024, 2, 14)),
    ]


def test_parse_repeated_date_accumulates():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-13
        * 9-10 ABC
        ## 2024-02-14
        * 9-10 DEF
        ## 2024-02-13
        * 10-11 GHI
    """))
    assert [e.project for e in log.by_date()[date(2024, 2, 13)]] == ['ABC', 'GHI']


def test_heading_without_date_suspends_lists():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-13
        * 9-10 ABC
        ## Ideas
        * 10-11 DEF
        ## 2024-02-14
        * 11-12 GHI
    """))
    assert [e.project for e in log] == ['ABC', 'GHI']


def test_heading_with_invalid_date_suspends_lists():
    assert Log.parse('## 2024-13-45\n* 9-10 ABC\n') == Log()


@pytest.mark.parametrize('heading', [
    '# 2024-02-13',
    '### Tuesday 2024-02-13 (office)',
    '## **2024-02-13**',
    '2024-02-13\n----------',
])
def test_heading_forms(heading):
    log = Log.parse(f'{heading}\n\n* 9-10 ABC\n')
    assert list(log) == [entry('9-10 ABC', date(2024, 2, 13))]


def test_parse_heading():
    assert parse_heading('2024-02-13') == date(2024, 2, 13)
    assert parse_heading('Week 7: 2024-02-13 and 2024-02-14') == date(2024, 2, 13)
    assert parse_heading('no date') is None
    assert parse_heading('2024-02-30') is None
    assert parse_heading('x2024-02-13') is None


def test_paragraph_keeps_current_date():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-13
        A slow morning.

        * 9-10 ABC
    """))
    assert len(log) == 1


def test_only_first_line_of_item_is_a_candidate():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-13
        * 9-10 ABC first
          continued notes
          * 10-11 DEF nested
        * a bullet that is not an entry
        * 11-12 **GHI** bold
    """))
    assert [(e.project, e.notes) for e in log] == [('ABC', 'first'), ('GHI', 'bold')]


def test_rejected_lines():
    parser = LogParser()
    parser.parse(textwrap.dedent("""\
        ## 2024-02-13
        * 9-10 ABC
        * remember the milk
        * 11-10 DEF
        * 9:00 - 24:15: GHI
    """))
    assert [(line.text, line.reason) for line in parser.rejected] == [
        ('remember the milk', Rejection.MISMATCH),
        ('11-10 DEF', Rejection.EMPTY_SPAN),
        ('9:00 - 24:15: GHI', Rejection.INVALID_TIME),
    ]
    assert {line.date for line in parser.rejected} == {date(2024, 2, 13)}
    parser.parse('')
    assert parser.rejected == []


def test_parse_requires_text():
    with pytest.raises(DocumentError):
        Log.parse(b'## 2024-02-13')


def test_by_date_empty():
    assert Log.parse('').by_date() == {}


def test_by_date():
    report = Log.parse(SAMPLE).by_date()
    assert list(report) == [date(2024, 2, 13), date(2024, 2, 14)]
    assert report[date(2024, 2, 13)] == Log([
        entry('9-10 ABC', date(2024, 2, 13)),
        entry('10-11 DEF', date(2024, 2, 13)),
        entry('11-12 ABC', date(2024, 2, 13)),
    ])
    assert report[date(2024, 2, 14)] == Log([
        entry('9-10 ABC', date(2024, 2, 14)),
        entry('10-11 DEF', date(2024, 2, 14)),
    ])


def test_by_project_empty():
    assert Log.parse('').by_project() == {}


def test_by_project():
    report = Log.parse(SAMPLE).by_project()
    assert list(report) == ['ABC', 'DEF']
    assert report['ABC'] == Log([
        entry('9-10 ABC', date(2024, 2, 13)),
        entry('11-12 ABC', date(2024, 2, 13)),
        entry('9-10 ABC', date(2024, 2, 14)),
    ])
    assert report['DEF'] == Log([
        entry('10-11 DEF', date(2024, 2, 13)),
        entry('10-11 DEF', date(2024, 2, 14)),
    ])


def test_by_project_sorts_names():
    log = Log.parse('## 2024-02-13\n* 9-10 ZZZ\n* 10-11 "AA"\n* 11-12 MMM\n')
    assert list(log.by_project()) == ['AA', 'MMM', 'ZZZ']


def test_grouping_keeps_every_entry():
    log = Log.parse(SAMPLE)
    flattened = Log(e for day in log.by_date().values() for e in day)
    assert flattened == log
    assert sum((day.sum_duration() for day in log.by_date().values()), datetime.timedelta()) == log.sum_duration()


def test_sum_duration_empty():
    assert Log.parse('').sum_duration() == datetime.timedelta()


def test_sum_duration_entries():
    assert Log.parse(SAMPLE).sum_duration() == datetime.timedelta(hours=5)


def test_equal_entries_sort_adjacent():
    log = Log.parse(textwrap.dedent("""\
        ## 2024-02-13
        * 9-10 ABC one
        * 10-11 DEF
        * 9-10 ABC two
    """))
    assert [e.project for e in log] == ['ABC', 'ABC', 'DEF']
    assert {e.notes for e in log[:2]} == {'one', 'two'}
