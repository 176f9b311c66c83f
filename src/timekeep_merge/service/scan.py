# SPDX-License-Identifier: MIT

import logging
from concurrent.futures import ThreadPoolExecutor

from timekeep_merge.configuration import DEFAULT_SCAN_BATCH_SIZE
from timekeep_merge.model.record_id import generate_record_id
from timekeep_merge.model.source_record import DocumentScanResult, SourceRecord
from timekeep_merge.parser.timekeep import extract_timekeep_codeblocks
from timekeep_merge.repository.vault import VaultRepository

logger = logging.getLogger(__name__)


def scan_document(repository: VaultRepository, path: str) -> DocumentScanResult:
    """
    Read one document and extract its timekeep records.

    Any failure is captured in the result instead of being raised so that
    one unreadable document does not stop the scan of the others.
    """
    try:
        content = repository.read_document(path)
        timekeeps = extract_timekeep_codeblocks(content)
    except Exception as e:
        logger.warning("Failed to read timekeeps from %s: %s", path, e)
        return DocumentScanResult(path=path, records=[], error=str(e))

    records = [
        SourceRecord(
            id=generate_record_id(),
            timekeep=timekeep,
            source_path=path,
            ordinal=index,
        )
        for index, timekeep in enumerate(timekeeps)
    ]
    return DocumentScanResult(path=path, records=records, error=None)


def scan_vault(
    repository: VaultRepository, batch_size: int = DEFAULT_SCAN_BATCH_SIZE
) -> list[DocumentScanResult]:
    """
    Scan every markdown document of the vault for timekeep records.

    Documents are read concurrently, batch_size at a time. Results are
    returned in document order.
    """
    if batch_size < 1:
        raise ValueError(f"Batch size must be at least 1, got {batch_size}")

    markdown_files = repository.get_markdown_files()
    logger.debug("Scanning %d documents", len(markdown_files))

    results: list[DocumentScanResult] = []
    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for i in range(0, len(markdown_files), batch_size):
            batch = markdown_files[i : i + batch_size]
            results.extend(
                executor.map(lambda path: scan_document(repository, path), batch)
            )
    return results


def collect_records(scan_results: list[DocumentScanResult]) -> list[SourceRecord]:
    records: list[SourceRecord] = []
    for scan_result in scan_results:
        records.extend(scan_result["records"])
    return records
