import csv
import datetime
import decimal
import typing


class DaysRange:

    def __init__(self, start_date: datetime.date, end_date: datetime.date):
        if start_date > end_date:
            raise ValueError(f'start date ({start_date.strftime("%Y-%m-%d")}) '
                             f'is after end date ({end_date.strftime("%Y-%m-%d")})')
        self._start = start_date
        self._end = end_date

    def __iter__(self):
        delta = self._end - self._start
        for i in range(delta.days + 1):
            yield self._start + datetime.timedelta(days=i)

    def __contains__(self, date: datetime.date) -> bool:
        return self._start <= date <= self._end

    def __len__(self):
        return (self._end - self._start).days + 1

    def __repr__(self):
        return f'DaysRange({self._start.isoformat()}, {self._end.isoformat()})'

    @property
    def start(self) -> datetime.date:
        return self._start

    @property
    def end(self) -> datetime.date:
        return self._end

    @classmethod
    def single(cls, date: datetime.date):
        return cls(date, date)

    @classmethod
    def spanning(cls, dates: typing.Iterable[datetime.date]):
        dates = list(dates)
        if not dates:
            raise ValueError('cannot span an empty collection of dates')
        return cls(min(dates), max(dates))


V = typing.TypeVar('V')


def pad_dates(mapping: typing.Mapping[datetime.date, V],
              dates_range: typing.Optional[DaysRange] = None,
              default: typing.Callable[[], V] = None) -> typing.Dict[datetime.date, V]:
    """
    Return a copy of `mapping` with a key for every date of `dates_range`.

    Without a range the mapping's own first and last date bound it. With an
    explicit range, keys outside of it are dropped, so the result holds
    exactly the dates of the range. Missing dates get `default()`.
    """
    if not mapping:
        return {}
    if dates_range is None:
        dates_range = DaysRange.spanning(mapping.keys())
    padded = {date: value for date, value in mapping.items() if date in dates_range}
    for date in dates_range:
        if date not in padded:
            padded[date] = default() if default else None
    return dict(sorted(padded.items()))


def hours(duration: datetime.timedelta) -> decimal.Decimal:
    minutes = duration // datetime.timedelta(minutes=1)
    return (decimal.Decimal(minutes) / 60).quantize(decimal.Decimal('0.01'), rounding=decimal.ROUND_HALF_UP)


def format_hours(duration: datetime.timedelta) -> str:
    return f'{hours(duration)}'


class CsvWriter:

    def __init__(self, filepath, header=None):
        self._filepath = filepath
        self._header = header

    def __enter__(self):
        self._file = open(self._filepath, 'w+', newline='')
        self._writer = csv.writer(self._file)
        if self._header:
            self._writer.writerow(self._header)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._file.close()

    def write(self, row: list[str]):
        self._writer.writerow(row)
