"""
Measure data structures supplied by the analysis platform.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class AlertLevel(Enum):
    """Quality gate alert level attached to a measure"""
    NONE = 'none'
    OK = 'ok'
    WARN = 'warn'
    ERROR = 'error'

    @classmethod
    def parse(cls, value: Union['AlertLevel', str, None]) -> 'AlertLevel':
        """
        Convert a raw alert status into an AlertLevel.

        Args:
            value: AlertLevel, level name (any case) or None

        Returns:
            Matching AlertLevel, NONE for missing values

        Raises:
            ValueError: If value is not a known alert level
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        if isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                return cls.NONE
            for level in cls:
                if level.value == normalized:
                    return level
        valid_levels = [level.name for level in cls]
        raise ValueError(f"Invalid alert level: {value!r}. Must be one of {valid_levels}")


class CoreMetrics:
    """Metric keys computed by the platform"""
    LINES = 'lines'
    COVERAGE = 'coverage'
    COMPLEXITY = 'complexity'
    CLASS_COMPLEXITY = 'class_complexity'
    ALERT_STATUS = 'alert_status'  # Aggregate of every other alert


@dataclass
class Measure:
    """Computed metric value, optionally annotated with a quality gate alert"""
    metric_key: str
    value: Optional[float] = None
    alert_status: AlertLevel = AlertLevel.NONE
    alert_text: Optional[str] = None

    def __post_init__(self):
        if not self.metric_key:
            raise ValueError("metric_key must not be empty")
        self.alert_status = AlertLevel.parse(self.alert_status)

    def is_alert_status(self) -> bool:
        """Check if this is the aggregate alert status measure"""
        return self.metric_key == CoreMetrics.ALERT_STATUS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the mapping used in measures files"""
        return {
            'metric': self.metric_key,
            'value': self.value,
            'alert_status': self.alert_status.name,
            'alert_text': self.alert_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Measure':
        """Create Measure from a measures file mapping"""
        value = data.get('value')
        return cls(
            metric_key=data['metric'],
            value=float(value) if value is not None else None,
            alert_status=AlertLevel.parse(data.get('alert_status')),
            alert_text=data.get('alert_text'),
        )
