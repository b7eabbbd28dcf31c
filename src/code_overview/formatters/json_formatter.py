"""JSON formatter for Code Overview."""

import json

from ..config import ScanConfig
from ..scanning.models import ScanResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the scan result as JSON, with the thresholds it was tiered by."""

    def render(self, result: ScanResult, config: ScanConfig) -> None:
        print(self.format(result, config))

    def format(self, result: ScanResult, config: ScanConfig) -> str:
        data = result.to_dict()
        data["config"] = config.to_dict()
        return json.dumps(data, indent=2)
