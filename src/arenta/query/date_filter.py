# SPDX-License-Identifier: MIT

import re
from enum import StrEnum

import pendulum

from arenta.error import ArentaError
from arenta.model.date_filter import DateFilter, Operator

_OPERATOR_P = re.compile(r"^(<=|>=|<|>)?\s*(.*)$", re.DOTALL)
_OFFSET_P = re.compile(r"^[+-]?\d+$")
_MONTH_DAY_P = re.compile(r"^(\d{1,2})-(\d{1,2})$")
_FULL_DATE_P = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_OPERATOR_CHARS = "<>=!"


class ParseErrorKind(StrEnum):
    BAD_OPERATOR = "bad operator"
    BAD_DATE = "bad date"
    RANGE_NOT_ALLOWED = "range not allowed"


class ParseError(ArentaError):
    def __init__(self, kind: ParseErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def parse_filter(text: str, today: pendulum.Date, allow_range: bool = True) -> DateFilter:
    """
    Parse a date filter expression such as "0", "+1", "<=-1", "12-25" or
    ">=2024-01-31".

    Args:
        text: The filter expression
        today: The date offsets and month-day dates are resolved against
        allow_range: False when only an exact day makes sense (timelines)

    Returns:
        The resolved filter

    Raises:
        ParseError: If the operator or the date part is malformed, or a
            comparison operator is given while ranges are not allowed
    """
    operator_match = _OPERATOR_P.match(text.strip())
    if operator_match is None:
        raise ParseError(ParseErrorKind.BAD_DATE, f"Invalid date filter: '{text}'")

    operator = Operator(operator_match.group(1) or "")
    date_spec = operator_match.group(2).strip()

    if date_spec and date_spec[0] in _OPERATOR_CHARS:
        raise ParseError(
            ParseErrorKind.BAD_OPERATOR,
            f"Unknown operator in '{text.strip()}' (valid operators: <, <=, >, >=)",
        )
    if operator != Operator.EQ and not allow_range:
        raise ParseError(
            ParseErrorKind.RANGE_NOT_ALLOWED,
            f"Operator '{operator}' is not allowed here, give a single day",
        )

    return {"operator": operator, "date": parse_date_spec(date_spec, today)}


def parse_date_spec(date_spec: str, today: pendulum.Date) -> pendulum.Date:
    """
    Resolve a day offset ("0", "+1", "-3"), a month-day ("mm-dd", in the
    year of today) or a full date ("yyyy-mm-dd") to a date.

    Raises:
        ParseError: If the text is none of those forms or names no real date
    """
    date_spec = date_spec.strip()
    if not date_spec:
        raise ParseError(ParseErrorKind.BAD_DATE, "A date is required")

    if _OFFSET_P.match(date_spec):
        try:
            return today.add(days=int(date_spec))
        except (OverflowError, ValueError):
            raise ParseError(
                ParseErrorKind.BAD_DATE, f"Day offset out of range: '{date_spec}'"
            )

    month_day_match = _MONTH_DAY_P.match(date_spec)
    if month_day_match:
        return _make_date(
            date_spec,
            today.year,
            int(month_day_match.group(1)),
            int(month_day_match.group(2)),
        )

    full_date_match = _FULL_DATE_P.match(date_spec)
    if full_date_match:
        return _make_date(
            date_spec,
            int(full_date_match.group(1)),
            int(full_date_match.group(2)),
            int(full_date_match.group(3)),
        )

    raise ParseError(
        ParseErrorKind.BAD_DATE,
        f"Invalid date '{date_spec}' (valid inputs: day offset like 0, +1, -1, mm-dd or yyyy-mm-dd)",
    )


def _make_date(date_spec: str, year: int, month: int, day: int) -> pendulum.Date:
    if month < 1 or month > 12:
        raise ParseError(
            ParseErrorKind.BAD_DATE, f"Month must be between 1 and 12, got {month}"
        )
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        raise ParseError(ParseErrorKind.BAD_DATE, f"No such date: '{date_spec}'")
