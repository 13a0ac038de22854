"""
Data models for the extraction engine and the scan pipeline.
Defines the findings of a single analysis and the records persisted per scan.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from enum import Enum
from datetime import datetime


class SourceType(Enum):
    FILE = "file"
    URL = "url"
    TEXT = "text"


class ScanStatus(Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class SecretFinding:
    value: str
    length: int

    @classmethod
    def of(cls, value: str) -> "SecretFinding":
        return cls(value=value, length=len(value))

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "length": self.length
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SecretFinding":
        return cls(value=data["value"], length=data.get("length", len(data["value"])))


@dataclass
class PartialFindings:
    """
    Findings collected by one scanner before merging.

    The three categories are dicts used as insertion-ordered sets.
    """
    urls: Dict[str, None] = field(default_factory=dict)
    domains: Dict[str, None] = field(default_factory=dict)
    paths: Dict[str, None] = field(default_factory=dict)
    secrets: List[SecretFinding] = field(default_factory=list)

    def add_url(self, value: str):
        self.urls.setdefault(value, None)

    def add_domain(self, value: str):
        self.domains.setdefault(value, None)

    def add_path(self, value: str):
        # '//' prefixes are URL scheme separators or comment markers, never paths
        if value.startswith("//"):
            return
        self.paths.setdefault(value, None)

    def add_secret(self, value: str):
        self.secrets.append(SecretFinding.of(value))


@dataclass(frozen=True)
class AnalysisResult:
    secrets: Tuple[SecretFinding, ...] = ()
    urls: Tuple[str, ...] = ()
    domains: Tuple[str, ...] = ()
    paths: Tuple[str, ...] = ()

    @property
    def total_findings(self) -> int:
        return len(self.secrets) + len(self.urls) + len(self.domains) + len(self.paths)

    def is_empty(self) -> bool:
        return self.total_findings == 0

    def counts(self) -> Dict[str, int]:
        return {
            "secrets": len(self.secrets),
            "urls": len(self.urls),
            "domains": len(self.domains),
            "paths": len(self.paths)
        }

    def to_dict(self) -> dict:
        return {
            "secrets": [s.to_dict() for s in self.secrets],
            "urls": list(self.urls),
            "domains": list(self.domains),
            "paths": list(self.paths)
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        return cls(
            secrets=tuple(SecretFinding.from_dict(s) for s in data.get("secrets", [])),
            urls=tuple(data.get("urls", [])),
            domains=tuple(data.get("domains", [])),
            paths=tuple(data.get("paths", []))
        )


@dataclass
class ScanRecord:
    scan_id: str
    source: str
    source_type: SourceType = SourceType.TEXT
    analyzed_at: str = field(default_factory=lambda: datetime.now().isoformat())
    status: ScanStatus = ScanStatus.COMPLETED
    size: int = 0
    error: Optional[str] = None
    result: Optional[AnalysisResult] = None

    @property
    def success(self) -> bool:
        return self.status == ScanStatus.COMPLETED

    def to_dict(self) -> dict:
        return {
            "scan_id": self.scan_id,
            "source": self.source,
            "source_type": self.source_type.value,
            "analyzed_at": self.analyzed_at,
            "status": self.status.value,
            "size": self.size,
            "error": self.error,
            "result": self.result.to_dict() if self.result else None,
            "stats": self.result.counts() if self.result else {}
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScanRecord":
        data = data.copy()
        data.pop("stats", None)
        if "source_type" in data:
            data["source_type"] = SourceType(data["source_type"])
        if "status" in data:
            data["status"] = ScanStatus(data["status"])
        if data.get("result") is not None:
            data["result"] = AnalysisResult.from_dict(data["result"])
        return cls(**data)
