"""Tests for reading measures from files"""

import json
import os
import tempfile

import pytest

from build_breaker.alerts.measure import AlertLevel
from build_breaker.utils.measure_reader import MeasureReader, read_measures


def write_file(content, suffix='.yaml'):
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


class TestMeasureReader:
    """Test MeasureReader"""

    def test_read_yaml(self):
        """Test reading measures from YAML in file order"""
        temp_file = write_file("""
measures:
  - metric: lines
    value: 1200
  - metric: coverage
    value: 72.5
    alert_status: WARN
    alert_text: "Coverage<80"
  - metric: class_complexity
    alert_status: ERROR
    alert_text: "Class complexity>50"
""")
        try:
            measures = MeasureReader(temp_file).read()
            assert [m.metric_key for m in measures] == ['lines', 'coverage', 'class_complexity']
            assert measures[0].alert_status is AlertLevel.NONE
            assert measures[1].alert_status is AlertLevel.WARN
            assert measures[1].alert_text == "Coverage<80"
            assert measures[2].alert_status is AlertLevel.ERROR
        finally:
            os.unlink(temp_file)

    def test_read_json_list(self):
        """Test reading a bare JSON list"""
        temp_file = write_file(json.dumps([
            {'metric': 'coverage', 'value': 61.0, 'alert_status': 'ERROR', 'alert_text': 'Coverage<80'},
        ]), suffix='.json')
        try:
            measures = read_measures(temp_file)
            assert len(measures) == 1
            assert measures[0].value == 61.0
            assert measures[0].alert_status is AlertLevel.ERROR
        finally:
            os.unlink(temp_file)

    def test_read_empty_file(self):
        """Test that an empty file has no measures"""
        temp_file = write_file("")
        try:
            assert read_measures(temp_file) == []
        finally:
            os.unlink(temp_file)

    def test_read_empty_measures_key(self):
        """Test that an empty measures key has no measures"""
        temp_file = write_file("measures:\n")
        try:
            assert read_measures(temp_file) == []
        finally:
            os.unlink(temp_file)

    def test_missing_file(self):
        """Test reading non-existent file"""
        with pytest.raises(FileNotFoundError):
            read_measures("/nonexistent/measures.yaml")

    def test_invalid_yaml(self):
        """Test reading invalid YAML"""
        temp_file = write_file("invalid: yaml: content: [")
        try:
            with pytest.raises(ValueError, match="Invalid measures file format"):
                read_measures(temp_file)
        finally:
            os.unlink(temp_file)

    def test_unexpected_structure(self):
        """Test that a mapping without measures key raises error"""
        temp_file = write_file("metrics: []")
        try:
            with pytest.raises(ValueError, match="'measures' key"):
                read_measures(temp_file)
        finally:
            os.unlink(temp_file)

    def test_entry_without_metric(self):
        """Test that a measure without metric key raises error"""
        temp_file = write_file("""
measures:
  - metric: lines
  - value: 3
""")
        try:
            with pytest.raises(ValueError, match="index 1"):
                read_measures(temp_file)
        finally:
            os.unlink(temp_file)

    def test_entry_with_invalid_level(self):
        """Test that an unknown alert level raises error"""
        temp_file = write_file("""
measures:
  - metric: coverage
    alert_status: CRITICAL
""")
        try:
            with pytest.raises(ValueError, match="index 0.*Invalid alert level"):
                read_measures(temp_file)
        finally:
            os.unlink(temp_file)

    def test_entry_not_mapping(self):
        """Test that a scalar entry raises error"""
        temp_file = write_file("measures:\n  - coverage\n")
        try:
            with pytest.raises(ValueError, match="expected a mapping"):
                read_measures(temp_file)
        finally:
            os.unlink(temp_file)
