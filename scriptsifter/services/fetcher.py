"""
Source acquisition from local files and remote URLs.
Failures are reported as (None, error) pairs and never reach the engine.
"""

import asyncio
from typing import Optional, Tuple

import aiohttp

from scriptsifter.core.config import FetchConfig


def _decode(raw_content: bytes, max_size: int) -> str:
    content = raw_content.decode('utf-8', errors='replace')
    if len(content) > max_size:
        content = content[:max_size]
    return content


def read_source_file(path: str, max_size: int = FetchConfig.max_source_size) -> Tuple[Optional[str], Optional[str]]:
    if not path:
        return None, "Please choose a file first."

    try:
        with open(path, 'rb') as f:
            raw_content = f.read(max_size * 4)
    except OSError as e:
        return None, f"Error reading file: {e.strerror or e}"

    return _decode(raw_content, max_size), None


async def download_source(
    url: str,
    session: aiohttp.ClientSession,
    config: Optional[FetchConfig] = None
) -> Tuple[Optional[str], Optional[str]]:
    config = config or FetchConfig()
    url = (url or "").strip()

    if not url:
        return None, "Please enter a script URL."

    headers = {
        'User-Agent': config.user_agent,
        'Accept': 'application/javascript, text/javascript, */*;q=0.8',
    }
    timeout = aiohttp.ClientTimeout(total=config.timeout)

    try:
        async with session.get(url, headers=headers, timeout=timeout) as response:
            if not 200 <= response.status < 300:
                return None, f"Fetch error: {response.status} {response.reason or ''}".rstrip()

            content_length = response.headers.get('Content-Length')
            if content_length:
                try:
                    if int(content_length) > config.max_source_size:
                        return None, f"File too large: {content_length} bytes"
                except ValueError:
                    pass

            raw_content = await response.read()

    except asyncio.TimeoutError:
        return None, "Timeout"
    except (aiohttp.InvalidURL, ValueError):
        return None, f"Invalid URL: {url}"
    except aiohttp.ClientError as e:
        return None, f"Fetch failed. Possibly blocked or network error: {str(e)[:80]}"

    return _decode(raw_content, config.max_source_size), None


async def fetch_source(url: str, config: Optional[FetchConfig] = None) -> Tuple[Optional[str], Optional[str]]:
    async with aiohttp.ClientSession() as session:
        return await download_source(url, session, config)
