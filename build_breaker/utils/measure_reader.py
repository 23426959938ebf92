"""
Utility for reading project measures from a YAML or JSON file.
"""

import logging
from pathlib import Path
from typing import Any, List, Union

import yaml

from build_breaker.alerts.measure import Measure

logger = logging.getLogger(__name__)


class MeasureReader:
    """Reads measures exported by the analysis platform"""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize measure reader.

        Args:
            path: Path to a YAML or JSON measures file
        """
        self.path = Path(path)

    def read(self) -> List[Measure]:
        """
        Read all measures from the file, in file order.

        Returns:
            List of Measure objects

        Raises:
            FileNotFoundError: If the measures file doesn't exist
            ValueError: If the file or one of its entries is invalid

        Example:
            measures:
              - metric: coverage
                value: 72.5
                alert_status: WARN
                alert_text: "Coverage<80"
        """
        try:
            with open(self.path, 'r') as f:
                content = yaml.safe_load(f)
        except FileNotFoundError:
            logger.error(f"Measures file not found: {self.path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse measures file {self.path}: {e}")
            raise ValueError(f"Invalid measures file format: {e}")

        if not content:
            logger.warning(f"No measures found in {self.path}")
            return []

        entries = self._extract_entries(content)

        measures = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Invalid measure at index {index}: expected a mapping, got {entry!r}")
            try:
                measures.append(Measure.from_dict(entry))
            except KeyError as e:
                raise ValueError(f"Invalid measure at index {index}: missing {e}")
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid measure at index {index}: {e}")

        logger.debug(f"Loaded {len(measures)} measures from {self.path}")
        return measures

    def _extract_entries(self, content: Any) -> List[Any]:
        if isinstance(content, list):
            return content
        if isinstance(content, dict) and 'measures' in content:
            return content['measures'] or []
        raise ValueError(f"Invalid measures file {self.path}: expected a list or a 'measures' key")


def read_measures(path: Union[str, Path]) -> List[Measure]:
    """Read measures from a YAML or JSON file"""
    return MeasureReader(path).read()
