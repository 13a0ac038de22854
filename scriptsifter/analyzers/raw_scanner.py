"""
Pattern matching over the unmodified source text.

Recovers URLs, domains and paths that sit outside quoted literals, for example
in comments. Secrets are only ever detected in literals.
"""

from scriptsifter.analyzers.patterns import DOMAIN_MATCHER, PATH_MATCHER, URL_MATCHER
from scriptsifter.models import PartialFindings


def scan_raw(source: str) -> PartialFindings:
    findings = PartialFindings()

    if not source:
        return findings

    for url in URL_MATCHER.values(source):
        findings.add_url(url)

    for path in PATH_MATCHER.values(source):
        findings.add_path(path)

    for domain in DOMAIN_MATCHER.values(source):
        findings.add_domain(domain)

    return findings
