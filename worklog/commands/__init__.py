from .debug import debug
from .export import export
from .report import report
