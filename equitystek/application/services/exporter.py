"""Export services for valuation reports.

Saves valuations to JSON files for persistence and analysis.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from equitystek.core.logging import get_logger
from equitystek.core.settings import get_settings
from equitystek.domain.calculator.portfolio import calculate_portfolio_stats
from equitystek.domain.models.valuation import Valuation

log = get_logger(__name__)


class ReportExporter:
    """Handles exporting of valuation reports."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize exporter.

        Args:
            output_dir: Directory where reports will be saved, defaults to
                the `export_dir` setting.
        """
        self.output_dir = output_dir or get_settings().export_dir
        self._ensure_dir()

    def _ensure_dir(self):
        """Ensure output directory exists."""
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)
            log.info("created_output_directory", path=self.output_dir)

    def save_valuations(
        self,
        valuations: Iterable[Valuation],
        prefix: str = "valuation",
        metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """Save valuations and portfolio totals to a JSON file.

        Args:
            valuations: Computed valuations.
            prefix: Filename prefix.
            metadata: Optional metadata to include in the file (e.g. rates used).

        Returns:
            Path to the saved file.
        """
        valuations = list(valuations)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(self.output_dir, f"{prefix}_{timestamp}.json")

        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "count": len(valuations),
                **(metadata or {})
            },
            "summary": calculate_portfolio_stats(valuations),
            "valuations": [v.model_dump(mode="json") for v in valuations],
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("report_save_failed", path=filepath, error=str(e))
            raise

        log.info("report_saved", path=filepath, count=len(valuations))
        return filepath
