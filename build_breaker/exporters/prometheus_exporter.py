"""Prometheus metrics for build breaker evaluations"""

from pathlib import Path
from typing import Iterable, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest, write_to_textfile

from build_breaker.alerts.alert_breaker import EvaluationResult
from build_breaker.alerts.measure import AlertLevel, Measure
from build_breaker.utils.logger import get_logger


class AlertMetrics:
    """Records evaluation outcomes in a dedicated Prometheus registry"""

    def __init__(self, config):
        """
        Initialize evaluation metrics

        Args:
            config: Configuration dictionary
        """
        self.config = config
        self.logger = get_logger(self.__class__.__name__)

        self.textfile: Optional[str] = config.get('metrics', {}).get('textfile')
        self.registry = CollectorRegistry()

        self._setup_metrics()

    def _setup_metrics(self):
        """Setup evaluation metrics"""
        self.alerts_total = Counter(
            'build_breaker_alerts_total',
            'Total number of measure alerts examined',
            ['level'],
            registry=self.registry
        )

        self.evaluations_total = Counter(
            'build_breaker_evaluations_total',
            'Total number of evaluations by outcome',
            ['outcome'],
            registry=self.registry
        )

        self.last_evaluation = Gauge(
            'build_breaker_last_evaluation_timestamp_seconds',
            'Last evaluation timestamp',
            registry=self.registry
        )

    def record(self, measures: Iterable[Measure], result: EvaluationResult):
        """
        Update metrics from an evaluation

        Args:
            measures: Measures given to the evaluation
            result: Outcome of the evaluation
        """
        if result.skipped:
            outcome = 'skipped'
        else:
            outcome = 'passed' if result.passed else 'failed'

            for measure in measures:
                if measure.is_alert_status():
                    continue
                if measure.alert_status in (AlertLevel.WARN, AlertLevel.ERROR):
                    self.alerts_total.labels(level=measure.alert_status.value).inc()

        self.evaluations_total.labels(outcome=outcome).inc()
        self.last_evaluation.set_to_current_time()

    def generate(self) -> bytes:
        """Get metrics in Prometheus exposition format"""
        return generate_latest(self.registry)

    def write_textfile(self) -> bool:
        """
        Write metrics to the configured textfile

        Returns:
            True if metrics were written, False if no textfile is configured

        Raises:
            OSError: If the textfile cannot be written
        """
        if not self.textfile:
            return False

        Path(self.textfile).parent.mkdir(parents=True, exist_ok=True)
        write_to_textfile(self.textfile, self.registry)
        self.logger.info(f"Metrics written to {self.textfile}")
        return True
