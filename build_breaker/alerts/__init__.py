"""
Alert evaluation module for the build breaker check.
"""

from build_breaker.alerts.measure import AlertLevel, CoreMetrics, Measure
from build_breaker.alerts.alert_breaker import (
    TAG,
    AlertBreaker,
    EvaluationResult,
    QualityGateError,
    evaluate,
)

__all__ = [
    'TAG',
    'AlertLevel',
    'CoreMetrics',
    'Measure',
    'AlertBreaker',
    'EvaluationResult',
    'QualityGateError',
    'evaluate',
]
