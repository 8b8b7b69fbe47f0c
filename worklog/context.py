import click

from .model.report import Fill


class WorklogContext:

    def __init__(self, config: dict = None):
        self._config = config or {}
        self._fill = Fill.parse(self._config.get('fill', Fill.PADDED))

    @property
    def color(self) -> bool:
        return bool(self._config.get('color', True))

    @property
    def fill(self) -> Fill:
        return self._fill


pass_worklog = click.make_pass_decorator(WorklogContext, ensure=True)
