"""
Per-literal classification into URLs, domains, paths and secret candidates.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union
from urllib.parse import quote, unquote, urlsplit

from scriptsifter.analyzers.patterns import DOMAIN_MATCHER, PATH_MATCHER, is_url_literal
from scriptsifter.analyzers.secrets import looks_like_secret
from scriptsifter.analyzers.tokenizer import Literals
from scriptsifter.core.config import Config
from scriptsifter.core.logger import logger
from scriptsifter.models import PartialFindings

# Characters a browser leaves untouched when serializing a URL path
_PATH_SAFE = "!$%&'()*+,/:;=@[\\]^|"

_FORBIDDEN_HOST_CHARS = set(' \t\n\r#%/:<>?@[\\]^|')

# Scheme plus any run of slashes or backslashes before the authority
_SPECIAL_PREFIX = re.compile(r'([hH][tT][tT][pP][sS]?):[/\\]*')


@dataclass(frozen=True)
class ParsedUrl:
    hostname: str
    path: str


@dataclass(frozen=True)
class UrlParseError:
    value: str
    reason: str


def _encode_host(host: str) -> str:
    if host.isascii():
        return host
    return host.encode('idna').decode('ascii')


def _normalize_special(value: str) -> str:
    """
    Rewrite an http(s) URL the way browsers read it: extra slashes after the
    scheme are skipped and backslashes before the query or fragment act as
    slashes.
    """
    prefix = _SPECIAL_PREFIX.match(value)
    if prefix is None:
        return value

    rest = value[prefix.end():]
    cut = len(rest)
    for marker in '?#':
        index = rest.find(marker)
        if index != -1:
            cut = min(cut, index)

    authority_and_path = rest[:cut].replace('\\', '/')
    return f"{prefix.group(1)}://{authority_and_path}{rest[cut:]}"


def parse_url(value: str) -> Union[ParsedUrl, UrlParseError]:
    """
    Split an absolute http(s) URL into hostname and path.

    The host is percent-decoded, lower-cased and IDNA-encoded. Failures are
    returned as UrlParseError instead of being raised.
    """
    try:
        parts = urlsplit(_normalize_special(value.strip()))
        hostname = parts.hostname
        # accessing the port validates it
        parts.port
    except ValueError as e:
        return UrlParseError(value, str(e))

    if not hostname:
        return UrlParseError(value, "empty host")

    path = quote(parts.path, safe=_PATH_SAFE) or "/"

    if parts.netloc.rpartition('@')[2].startswith('['):
        return ParsedUrl(hostname=f"[{hostname}]", path=path)

    hostname = unquote(hostname).lower()

    if not hostname:
        return UrlParseError(value, "empty host")

    if _FORBIDDEN_HOST_CHARS.intersection(hostname):
        return UrlParseError(value, f"forbidden host character in {hostname!r}")

    try:
        hostname = _encode_host(hostname)
    except UnicodeError as e:
        return UrlParseError(value, f"invalid international host: {e}")

    return ParsedUrl(hostname=hostname, path=path)



def classify_literal(value: str, findings: PartialFindings, config: Optional[Config] = None):
    config = config or Config()

    if not value:
        return

    if is_url_literal(value):
        findings.add_url(value)

        parsed = parse_url(value)
        if isinstance(parsed, UrlParseError):
            logger.debug(f"Skipping host/path of unparsable URL {value[:80]!r}: {parsed.reason}")
        else:
            findings.add_domain(parsed.hostname)
            if parsed.path and parsed.path != "/":
                findings.add_path(parsed.path)

        if not config.check_url_literals_for_secrets:
            return
    else:
        for domain in DOMAIN_MATCHER.values(value):
            findings.add_domain(domain)

        for path in PATH_MATCHER.values(value):
            findings.add_path(path)

    if looks_like_secret(value, config.secrets):
        findings.add_secret(value)


def classify_literals(literals: Iterable[str], config: Optional[Config] = None) -> PartialFindings:
    findings = PartialFindings()
    for literal in literals:
        classify_literal(literal, findings, config)
    return findings


def scan_literals(source: str, config: Optional[Config] = None) -> PartialFindings:
    return classify_literals(Literals(source), config)
