"""
JSON export functionality.
Serializes an analysis result to the structured scan-results format.
"""

import json
import os

from scriptsifter.models import AnalysisResult
from scriptsifter.core.logger import logger


class JSONExporter:

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_json(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)

    def export(self, result: AnalysisResult, path: str) -> str:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json(result))

        logger.debug(f"JSON results written to {path}")

        return path

    def load(self, path: str) -> AnalysisResult:
        with open(path, 'r', encoding='utf-8') as f:
            return AnalysisResult.from_dict(json.load(f))
