"""
DataStore service for persisting and loading scan records.
Each scan gets its own directory holding the record and both download formats.
"""

import json
import re
from pathlib import Path
from typing import List, Optional
from datetime import datetime
import uuid

from scriptsifter.models import ScanRecord
from scriptsifter.output import JSONExporter, build_text_report


class DataStore:

    RECORD_FILE = "record.json"
    JSON_RESULTS_FILE = "scan-results.json"
    TEXT_RESULTS_FILE = "scan-results.txt"

    _SCAN_ID_PATTERN = re.compile(r'[A-Za-z0-9_\-]+')

    def __init__(self, output_dir: str = "scan_output"):
        self.base_dir = Path(output_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.exporter = JSONExporter()

    def _get_scan_dir(self, scan_id: str, create: bool = False) -> Optional[Path]:
        if not self._SCAN_ID_PATTERN.fullmatch(scan_id):
            return None
        scan_dir = self.base_dir / scan_id
        if create:
            scan_dir.mkdir(parents=True, exist_ok=True)
        return scan_dir

    @staticmethod
    def generate_scan_id() -> str:
        return f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def save_scan(self, record: ScanRecord) -> str:
        scan_dir = self._get_scan_dir(record.scan_id, create=True)
        if scan_dir is None:
            raise ValueError(f"Invalid scan id: {record.scan_id!r}")

        with open(scan_dir / self.RECORD_FILE, 'w', encoding='utf-8') as f:
            json.dump(record.to_dict(), f, indent=2, ensure_ascii=False)

        if record.result is not None:
            self.exporter.export(record.result, str(scan_dir / self.JSON_RESULTS_FILE))
            with open(scan_dir / self.TEXT_RESULTS_FILE, 'w', encoding='utf-8') as f:
                f.write(build_text_report(record.result))

        return str(scan_dir)

    def load_scan(self, scan_id: str) -> Optional[ScanRecord]:
        scan_dir = self._get_scan_dir(scan_id)
        if scan_dir is None:
            return None

        filepath = scan_dir / self.RECORD_FILE
        if not filepath.exists():
            return None

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return ScanRecord.from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            return None

    def get_results_path(self, scan_id: str, filename: str) -> Optional[Path]:
        scan_dir = self._get_scan_dir(scan_id)
        if scan_dir is None or filename not in (self.JSON_RESULTS_FILE, self.TEXT_RESULTS_FILE):
            return None
        path = scan_dir / filename
        return path if path.exists() else None

    def get_all_scans(self) -> List[ScanRecord]:
        records = []
        if self.base_dir.exists():
            for item in self.base_dir.iterdir():
                if item.is_dir():
                    record = self.load_scan(item.name)
                    if record:
                        records.append(record)
        records.sort(key=lambda r: r.analyzed_at, reverse=True)
        return records
