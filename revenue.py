import calendar
import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

PERIODS = ('month', 'year', 'lifetime')
MONTH_WINDOW_DAYS = 30


# ==========================================
# DATA TYPES
# ==========================================
@dataclass(frozen=True)
class RevenueRecord:
    """A single dated revenue figure (e.g. one project's revenue)"""
    date: object
    amount: object = 0


@dataclass(frozen=True)
class SeriesPoint:
    bucket_start: date
    label: str
    period_amount: float
    cumulative_amount: float

    def to_dict(self):
        return {
            'date': self.bucket_start.isoformat(),
            'label': self.label,
            'revenue': self.period_amount,
            'cumulative': self.cumulative_amount,
        }


# ==========================================
# LENIENT PARSING
# ==========================================
def _field(record, name):
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def parse_date(value):
    """Return a ``date`` for ``value`` or None when it cannot be read."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    # ISO timestamps are read by their YYYY-MM-DD prefix
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def parse_amount(value):
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.debug("Treating unreadable amount %r as 0", value)
        return 0.0
    if not math.isfinite(amount):
        logger.debug("Treating non-finite amount %r as 0", value)
        return 0.0
    return amount


def daily_totals(records):
    """Sum amounts per calendar day, skipping records whose date is unreadable."""
    totals = defaultdict(float)
    skipped = 0
    for record in records or ():
        day = parse_date(_field(record, 'date'))
        if day is None:
            skipped += 1
            continue
        totals[day] += parse_amount(_field(record, 'amount'))
    if skipped:
        logger.debug("Skipped %d revenue record(s) with an unreadable date", skipped)
    return totals


# ==========================================
# SERIES BUILDER
# ==========================================
def _month_buckets(totals, today):
    buckets = []
    start = today - timedelta(days=MONTH_WINDOW_DAYS - 1)
    for offset in range(MONTH_WINDOW_DAYS):
        day = start + timedelta(days=offset)
        if offset == 0 or day.day % 5 == 0:
            label = f"{day.strftime('%b')} {day.day}"
        else:
            label = ''
        buckets.append((day, label, totals.get(day, 0.0)))
    return buckets


def _year_buckets(totals, year):
    buckets = []
    for month in range(1, 13):
        month_start = date(year, month, 1)
        month_end = date(year, month, calendar.monthrange(year, month)[1])
        amount = sum(v for d, v in totals.items() if month_start <= d <= month_end)
        buckets.append((month_start, month_start.strftime('%b'), amount))
    return buckets


def _lifetime_buckets(totals, today):
    years = {d.year for d in totals}
    start_year = min(years) if years else today.year
    end_year = max(max(years) if years else today.year, today.year)

    per_year = defaultdict(float)
    for d, v in totals.items():
        per_year[d.year] += v

    return [
        (date(year, 1, 1), f"{year:04d}", per_year.get(year, 0.0))
        for year in range(start_year, end_year + 1)
    ]


def build_series(records, period, reference_year=None, today=None):
    """
    Turn dated revenue records into a gap-free, chart-ready series.

    ``period`` is one of ``month`` (30 daily buckets ending ``today``),
    ``year`` (12 monthly buckets of ``reference_year``) or ``lifetime``
    (one bucket per year from the first recorded year through the current
    one). ``today`` defaults to the system date; pass it explicitly for
    deterministic output.

    Bad records never raise: unreadable dates are skipped and missing
    amounts count as zero. Only amounts inside the returned window are
    included in the cumulative total.
    """
    if period not in PERIODS:
        raise ValueError(f"Unknown period {period!r}; expected one of {PERIODS}")

    today = parse_date(today) or date.today()
    totals = daily_totals(records)

    if period == 'month':
        buckets = _month_buckets(totals, today)
    elif period == 'year':
        buckets = _year_buckets(totals, reference_year or today.year)
    else:
        buckets = _lifetime_buckets(totals, today)

    series = []
    cumulative = 0.0
    for bucket_start, label, amount in buckets:
        cumulative += amount
        series.append(SeriesPoint(bucket_start, label, amount, cumulative))
    return series


# ==========================================
# DASHBOARD HELPERS
# ==========================================
def total_revenue(series):
    return series[-1].cumulative_amount if series else 0.0


def available_years(records):
    """Distinct years present in ``records``, newest first."""
    return sorted({d.year for d in daily_totals(records)}, reverse=True)


def revenue_by_category(rows):
    """Sum revenue per category, largest first. Rows without a category are ignored."""
    totals = defaultdict(float)
    for row in rows or ():
        category = _field(row, 'category')
        if not category:
            continue
        totals[category] += parse_amount(_field(row, 'revenue'))
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def format_currency(value):
    value = parse_amount(value)
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:.0f}"


def period_label(period, year=None):
    if period == 'month':
        return 'Last 30 days'
    if period == 'year':
        return f"Year {(year or date.today().year):04d}"
    return 'All time'
