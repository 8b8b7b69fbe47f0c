import os

import click

from ..context import pass_worklog, WorklogContext
from ..model.report import Fill, by_date, by_project
from ..writers import DailyCsvWriter, EntryCsvWriter, ProjectCsvWriter, SummaryWorkbookWriter
from .report import read_log


@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--output', '-o', help='Reports output path', default='reports',
              type=click.Path(exists=False, file_okay=False, dir_okay=True))
@click.option('--fill', '-f', type=click.Choice([fill.value for fill in Fill], case_sensitive=False),
              help='Pad the days without entries (padded) or skip them (sparse)')
@click.command(help='Export entries and sums to CSV and XLSX files')
@pass_worklog
def export(worklog: WorklogContext, file, output, fill):
    log = read_log(file)
    if not log:
        click.echo(f'no entries found in {file}', err=True)
    fill = Fill.parse(fill) if fill else worklog.fill
    days = by_date(log, fill)
    projects = by_project(log)
    os.makedirs(output, exist_ok=True)
    with (EntryCsvWriter(f'{output}/entries.csv') as entries_writer,
          DailyCsvWriter(f'{output}/agg-daily.csv') as daily_writer,
          ProjectCsvWriter(f'{output}/agg-projects.csv') as projects_writer,
          SummaryWorkbookWriter(f'{output}/summary.xlsx') as workbook):
        for entry in log:
            entries_writer.write(entry)
            workbook.write_entry(entry)
        for day in days:
            daily_writer.write(day)
            workbook.write_day(*day)
        for project in projects:
            projects_writer.write(project)
            workbook.write_project(*project)
    click.echo(f'exported {len(log)} entries to {output}')
