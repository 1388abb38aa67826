"""Interval models."""

from enum import Enum
from typing import Dict, List, NamedTuple, Union

from ..errors import InvalidIntervalLabel


class IntervalLabel(str, Enum):
    """Reporting intervals offered by the dashboard."""
    ONE_HOUR = "1 hour"
    THREE_HOURS = "3 hours"
    SIX_HOURS = "6 hours"
    TWELVE_HOURS = "12 hours"
    TWENTY_FOUR_HOURS = "24 hours"
    ONE_DAY = "1 day"
    TWO_DAYS = "2 days"
    THREE_DAYS = "3 days"
    FOUR_DAYS = "4 days"
    FIVE_DAYS = "5 days"
    SIX_DAYS = "6 days"
    ONE_WEEK = "1 week"
    ONE_MONTH = "1 month"
    THREE_MONTHS = "3 months"
    SIX_MONTHS = "6 months"
    TWELVE_MONTHS = "12 months"

    @classmethod
    def parse(cls, label: Union["IntervalLabel", str]) -> "IntervalLabel":
        """Resolve a label string to an interval.

        Args:
            label: An ``IntervalLabel`` or its text, e.g. ``"3 months"``

        Raises:
            InvalidIntervalLabel: If the text is not a known interval
        """
        if isinstance(label, cls):
            return label
        if isinstance(label, str):
            try:
                return cls(label.strip())
            except ValueError:
                pass
        raise InvalidIntervalLabel(label, [member.value for member in cls])

    @property
    def rule(self) -> "StepRule":
        """Get the step rule for this interval."""
        return STEP_RULES[self]

    @property
    def is_hourly(self) -> bool:
        """Whether the interval is counted in hours."""
        return self.rule.kind is StepKind.HOURS


class StepKind(str, Enum):
    """Unit an interval advances by."""
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


class StepRule(NamedTuple):
    """How far an interval moves the end of a window."""
    kind: StepKind
    count: int

    def describe(self) -> str:
        unit = self.kind.value if self.count != 1 else self.kind.value[:-1]
        return f"+{self.count} {unit}"


STEP_RULES: Dict[IntervalLabel, StepRule] = {
    IntervalLabel.ONE_HOUR: StepRule(StepKind.HOURS, 1),
    IntervalLabel.THREE_HOURS: StepRule(StepKind.HOURS, 3),
    IntervalLabel.SIX_HOURS: StepRule(StepKind.HOURS, 6),
    IntervalLabel.TWELVE_HOURS: StepRule(StepKind.HOURS, 12),
    IntervalLabel.TWENTY_FOUR_HOURS: StepRule(StepKind.HOURS, 24),
    IntervalLabel.ONE_DAY: StepRule(StepKind.DAYS, 1),
    IntervalLabel.TWO_DAYS: StepRule(StepKind.DAYS, 2),
    IntervalLabel.THREE_DAYS: StepRule(StepKind.DAYS, 3),
    IntervalLabel.FOUR_DAYS: StepRule(StepKind.DAYS, 4),
    IntervalLabel.FIVE_DAYS: StepRule(StepKind.DAYS, 5),
    IntervalLabel.SIX_DAYS: StepRule(StepKind.DAYS, 6),
    IntervalLabel.ONE_WEEK: StepRule(StepKind.DAYS, 7),
    IntervalLabel.ONE_MONTH: StepRule(StepKind.MONTHS, 1),
    IntervalLabel.THREE_MONTHS: StepRule(StepKind.MONTHS, 3),
    IntervalLabel.SIX_MONTHS: StepRule(StepKind.MONTHS, 6),
    IntervalLabel.TWELVE_MONTHS: StepRule(StepKind.YEARS, 1),
}


def interval_choices() -> List[str]:
    """Interval labels, shortest first.

    Includes ``"24 hours"``, which the dashboard form itself does not offer.
    """
    return [label.value for label in IntervalLabel]


def hour_choices() -> List[str]:
    """Start times the dashboard offers, one per hour of the day."""
    return [f"{hour:02d}:00:00" for hour in range(24)]
