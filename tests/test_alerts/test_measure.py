"""Tests for Measure and AlertLevel"""

import pytest

from build_breaker.alerts.measure import AlertLevel, CoreMetrics, Measure


class TestAlertLevel:
    """Test AlertLevel parsing"""

    @pytest.mark.parametrize("raw,expected", [
        (None, AlertLevel.NONE),
        ("", AlertLevel.NONE),
        ("none", AlertLevel.NONE),
        ("OK", AlertLevel.OK),
        ("warn", AlertLevel.WARN),
        (" Error ", AlertLevel.ERROR),
        (AlertLevel.WARN, AlertLevel.WARN),
    ])
    def test_parse(self, raw, expected):
        """Test parsing known alert levels"""
        assert AlertLevel.parse(raw) is expected

    def test_parse_invalid(self):
        """Test that unknown levels raise error"""
        with pytest.raises(ValueError, match="Invalid alert level"):
            AlertLevel.parse("critical")

    def test_parse_invalid_type(self):
        """Test that non-string levels raise error"""
        with pytest.raises(ValueError, match="Invalid alert level"):
            AlertLevel.parse(3)


class TestMeasure:
    """Test Measure data class"""

    def test_defaults(self):
        """Test creating a measure without alert"""
        measure = Measure(metric_key=CoreMetrics.LINES, value=1200.0)

        assert measure.alert_status is AlertLevel.NONE
        assert measure.alert_text is None
        assert not measure.is_alert_status()

    def test_alert_status_normalized(self):
        """Test that string alert levels are converted"""
        measure = Measure(CoreMetrics.COVERAGE, 61.0, "ERROR", "Coverage<80")

        assert measure.alert_status is AlertLevel.ERROR

    def test_empty_metric_key(self):
        """Test that empty metric key raises error"""
        with pytest.raises(ValueError, match="metric_key"):
            Measure(metric_key="")

    def test_is_alert_status(self):
        """Test aggregate alert status detection"""
        assert Measure(CoreMetrics.ALERT_STATUS).is_alert_status()

    def test_from_dict(self):
        """Test creating a measure from a file mapping"""
        measure = Measure.from_dict({
            'metric': 'coverage',
            'value': '72.5',
            'alert_status': 'warn',
            'alert_text': 'Coverage<80',
        })

        assert measure.metric_key == 'coverage'
        assert measure.value == 72.5
        assert measure.alert_status is AlertLevel.WARN
        assert measure.alert_text == 'Coverage<80'

    def test_from_dict_minimal(self):
        """Test that only the metric key is required"""
        measure = Measure.from_dict({'metric': 'lines'})

        assert measure.value is None
        assert measure.alert_status is AlertLevel.NONE

    def test_from_dict_missing_metric(self):
        """Test that a missing metric key raises KeyError"""
        with pytest.raises(KeyError):
            Measure.from_dict({'value': 1})

    def test_to_dict(self):
        """Test converting a measure to a file mapping"""
        measure = Measure(CoreMetrics.COVERAGE, 61.0, AlertLevel.ERROR, "Coverage<80")

        assert measure.to_dict() == {
            'metric': 'coverage',
            'value': 61.0,
            'alert_status': 'ERROR',
            'alert_text': 'Coverage<80',
        }
