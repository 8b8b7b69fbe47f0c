import datetime
import typing

import click

from ..common import DaysRange
from ..context import pass_worklog, WorklogContext
from ..model.report import Fill, by_date_then_project, by_project_report, total
from ..model.timelog import Log

DATE_FORMATS = ['%Y-%m-%d']


def resolve_range(log: Log, start_date: typing.Optional[datetime.datetime],
                  end_date: typing.Optional[datetime.datetime]) -> typing.Optional[DaysRange]:
    if start_date is None and end_date is None:
        return None
    if start_date is None or end_date is None:
        given = (start_date or end_date).date()
        dates = [entry.date for entry in log]
        start = given if start_date else min(dates, default=given)
        end = given if end_date else max(dates, default=given)
        if start > end:
            return DaysRange.single(given)
        return DaysRange(start, end)
    start, end = start_date.date(), end_date.date()
    try:
        return DaysRange(start, end)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--start-date' / '--end-date'")


def read_log(file) -> Log:
    with open(file, encoding='utf-8') as f:
        return Log.parse(f.read())


@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--fill', '-f', type=click.Choice([fill.value for fill in Fill], case_sensitive=False),
              help='Pad the days without entries (padded) or skip them (sparse)')
@click.option('--start-date', '-s', type=click.DateTime(DATE_FORMATS), help='First day of the report, YYYY-mm-dd')
@click.option('--end-date', '-e', type=click.DateTime(DATE_FORMATS), help='Last day of the report, YYYY-mm-dd')
@click.option('--projects/--no-projects', default=False, help='Print the per project summary')
@click.option('--color/--no-color', default=None, help='Emphasize report titles')
@click.command(help='Report sum per day and sum per project')
@pass_worklog
def report(worklog: WorklogContext, file, fill, start_date, end_date, projects, color):
    log = read_log(file)
    fill = Fill.parse(fill) if fill else worklog.fill
    color = worklog.color if color is None else color
    dates_range = resolve_range(log, start_date, end_date)
    if dates_range is not None:
        log = Log(entry for entry in log if entry.date in dates_range)
    for day in by_date_then_project(log, fill, dates_range):
        click.echo(day.text(color))
    if projects:
        click.echo(by_project_report(log).text(color))
    click.echo(total(log).text(color))
