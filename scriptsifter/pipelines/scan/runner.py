"""
Scan Runner - acquires script source, runs the extraction engine and stores
the outcome.
"""

import asyncio
from typing import Optional

import aiohttp

from scriptsifter.analyzers import CodeAnalyzer
from scriptsifter.core.config import Config, get_default_config
from scriptsifter.core.logger import logger
from scriptsifter.models import ScanRecord, ScanStatus, SourceType
from scriptsifter.services.datastore import DataStore
from scriptsifter.services.fetcher import download_source, read_source_file


class ScanRunner:

    def __init__(
        self,
        config: Optional[Config] = None,
        silent_mode: bool = False,
        output_dir: Optional[str] = None
    ):
        self.config = config or get_default_config()
        if output_dir:
            self.config.output_dir = output_dir
        self.silent_mode = silent_mode
        self.analyzer = CodeAnalyzer(self.config)
        self.datastore = DataStore(self.config.output_dir) if self.config.save_results else None

    def _finish(self, record: ScanRecord) -> ScanRecord:
        if self.datastore:
            location = self.datastore.save_scan(record)
            if not self.silent_mode:
                logger.info(f"Results saved to: {location}")
        return record

    def _failed(self, source: str, source_type: SourceType, error: str) -> ScanRecord:
        logger.error(error)
        record = ScanRecord(
            scan_id=DataStore.generate_scan_id(),
            source=source,
            source_type=source_type,
            status=ScanStatus.FAILED,
            error=error
        )
        return self._finish(record)

    def run_text(self, source: str, label: str = "inline", source_type: SourceType = SourceType.TEXT) -> ScanRecord:
        if not self.silent_mode:
            logger.info("Analyzing code...")

        result = self.analyzer.analyze(source)

        record = ScanRecord(
            scan_id=DataStore.generate_scan_id(),
            source=label,
            source_type=source_type,
            size=len(source or ""),
            result=result
        )

        if not self.silent_mode:
            counts = result.counts()
            logger.info(
                f"Analysis complete: {counts['secrets']} secrets, {counts['urls']} URLs, "
                f"{counts['domains']} domains, {counts['paths']} paths"
            )

        return self._finish(record)

    def run_file(self, path: str) -> ScanRecord:
        if not self.silent_mode:
            logger.info(f'Reading file "{path}"...')

        content, error = read_source_file(path, self.config.fetch.max_source_size)
        if error:
            return self._failed(path, SourceType.FILE, error)

        return self.run_text(content, label=path, source_type=SourceType.FILE)

    async def run_async(self, url: str, session: Optional[aiohttp.ClientSession] = None) -> ScanRecord:
        if not self.silent_mode:
            logger.info(f"Fetching {url} ...")

        if session is None:
            async with aiohttp.ClientSession() as own_session:
                content, error = await download_source(url, own_session, self.config.fetch)
        else:
            content, error = await download_source(url, session, self.config.fetch)

        if error:
            return self._failed(url, SourceType.URL, error)

        return self.run_text(content, label=url, source_type=SourceType.URL)

    def run_url(self, url: str) -> ScanRecord:
        return asyncio.run(self.run_async(url))
