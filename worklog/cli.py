import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from .commands import debug, export, report
from .context import WorklogContext


def load_config(path) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, 'r') as f:
        return load(f.read(), Loader=Loader) or {}


@click.group(context_settings={'auto_envvar_prefix': 'WORKLOG'})
@click.option('--config', default='worklog.yaml', type=click.Path(dir_okay=False), help='YAML configuration file')
@click.pass_context
def entry_point(ctx, config):
    config = load_config(config)
    ctx.default_map = config
    try:
        ctx.obj = WorklogContext(config)
    except ValueError as e:
        raise click.UsageError(f'invalid configuration: {e}')


entry_point.add_command(debug)
entry_point.add_command(report)
entry_point.add_command(export)


if __name__ == '__main__':
    entry_point()
