"""
Plain-text report rendering.
"""

from typing import Iterable, List

from scriptsifter.models import AnalysisResult


def _section(title: str, values: List[str]) -> str:
    lines = [f"{title} ({len(values)}):"]
    lines.extend(f"{i}. {value}" for i, value in enumerate(values, 1))
    return "\n".join(lines) + "\n"


def build_text_report(result: AnalysisResult) -> str:
    sections: Iterable[str] = (
        _section("Secrets", [s.value for s in result.secrets]),
        _section("URLs", list(result.urls)),
        _section("Domains", list(result.domains)),
        _section("Paths", list(result.paths)),
    )
    return "\n".join(sections)
