"""
Merging of raw-source and literal findings into the final result.
"""

from scriptsifter.models import AnalysisResult, PartialFindings


def _union(*groups) -> tuple:
    merged = {}
    for group in groups:
        for value in group:
            merged.setdefault(value, None)
    return tuple(merged)


def merge(raw: PartialFindings, literal: PartialFindings) -> AnalysisResult:
    """
    Union the URL, domain and path sets of both scans, keeping first-seen order
    (raw findings first). Secrets are concatenated and never deduplicated.
    """
    return AnalysisResult(
        secrets=tuple(raw.secrets) + tuple(literal.secrets),
        urls=_union(raw.urls, literal.urls),
        domains=_union(raw.domains, literal.domains),
        paths=_union(raw.paths, literal.paths)
    )
