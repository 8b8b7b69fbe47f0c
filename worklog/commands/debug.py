import click

from ..model.timelog import LogParser


@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--verbose', '-v', is_flag=True, help='Also list the lines that were skipped')
@click.command(help='Print parsed time log entries')
def debug(file, verbose):
    with open(file, encoding='utf-8') as f:
        content = f.read()
    parser = LogParser()
    for entry in parser.parse(content):
        click.echo(str(entry))
    if verbose:
        for line in parser.rejected:
            click.echo(f'skipped {line.date.isoformat()} | {line.text} ({line.reason.value})', err=True)
