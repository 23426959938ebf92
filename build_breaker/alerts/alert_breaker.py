"""
Build breaker check: fails the analysis when measures carry error alerts.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from build_breaker.alerts.measure import AlertLevel, Measure
from build_breaker.config.settings import BreakerConfig

logger = logging.getLogger(__name__)

TAG = '[BUILD BREAKER]'


class QualityGateError(Exception):
    """Raised when one or more measures carry an error alert"""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__('\n'.join([self.summary] + self.messages))

    @property
    def summary(self) -> str:
        return summary_message(len(self.messages))


def summary_message(error_count: int) -> str:
    """Build the failure summary for a number of error alerts"""
    return f"{TAG} Alert thresholds have been hit ({error_count} times)."


@dataclass
class EvaluationResult:
    """Outcome of a build breaker evaluation"""
    passed: bool
    errors: List[str] = field(default_factory=list)
    skipped: bool = False

    @classmethod
    def success(cls, skipped: bool = False) -> 'EvaluationResult':
        return cls(passed=True, skipped=skipped)

    @classmethod
    def failure(cls, errors: List[str]) -> 'EvaluationResult':
        return cls(passed=False, errors=list(errors))

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def message(self) -> str:
        """Failure summary, empty when the evaluation passed"""
        if self.passed:
            return ''
        return summary_message(len(self.errors))

    def raise_for_status(self) -> None:
        """
        Raise if the evaluation failed.

        Raises:
            QualityGateError: Carrying every error alert message
        """
        if self.failed:
            raise QualityGateError(self.errors)


def evaluate(measures: Iterable[Measure], config: BreakerConfig,
             log: Optional[logging.Logger] = None) -> EvaluationResult:
    """
    Evaluate measure alerts against the quality gate.

    Warning alerts are logged and do not fail the evaluation. Error alerts
    are logged and collected, in the order the measures are given. The
    aggregate alert status measure is never evaluated.

    Args:
        measures: Measures computed for the project
        config: Build breaker settings
        log: Logger receiving warning and error alerts (module logger if None)

    Returns:
        EvaluationResult, failed if at least one error alert was found
    """
    if config.skip:
        return EvaluationResult.success(skipped=True)

    log = log or logger
    errors = []

    for measure in measures:
        if measure.is_alert_status():
            continue

        text = measure.alert_text or ''
        if measure.alert_status is AlertLevel.ERROR:
            message = f"{TAG} {text}"
            log.error(message)
            errors.append(message)
        elif measure.alert_status is AlertLevel.WARN:
            log.warning(text)

    if errors:
        return EvaluationResult.failure(errors)
    return EvaluationResult.success()


class AlertBreaker:
    """Post-analysis check breaking the build on error alerts"""

    def __init__(self, config: Optional[BreakerConfig] = None):
        """
        Initialize alert breaker.

        Args:
            config: Build breaker settings (defaults enable the check)
        """
        self.config = config or BreakerConfig()

    def should_execute(self) -> bool:
        """Check if the breaker is enabled"""
        return not self.config.skip

    def analyse_measures(self, measures: Iterable[Measure],
                         log: Optional[logging.Logger] = None) -> EvaluationResult:
        """Evaluate measures whatever the skip setting"""
        return evaluate(measures, BreakerConfig(skip=False), log)

    def execute_on(self, measures: Iterable[Measure],
                   log: Optional[logging.Logger] = None) -> EvaluationResult:
        """
        Run the check as part of the analysis.

        Args:
            measures: Measures computed for the project
            log: Logger receiving warning and error alerts

        Returns:
            EvaluationResult of a passed or skipped evaluation

        Raises:
            QualityGateError: If any measure carries an error alert
        """
        if not self.should_execute():
            return EvaluationResult.success(skipped=True)

        result = self.analyse_measures(measures, log)
        result.raise_for_status()
        return result
