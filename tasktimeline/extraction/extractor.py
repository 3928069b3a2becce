"""Task extraction for tasktimeline.

Scans document text with a compiled task pattern and turns matches into task
records. Matches whose date token does not parse are dropped silently: a
pattern routinely matches text that is not a task.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from tasktimeline.extraction.date_parser import parse_date
from tasktimeline.models.task import SourceDocument, TaskRecord
from tasktimeline.models.task_factory import create_task_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawMatch:
    """One pattern match with its location in the document."""
    group1: str
    group2: str
    group3: str
    match_start: int
    match_end: int
    matched_text: str
    line: int
    column: int


def _group(match, index: int) -> str:
    if index > (match.re.groups or 0):
        return ""
    return match.group(index) or ""


def extract_matches(text: str, pattern: re.Pattern) -> Iterator[RawMatch]:
    """Yield every non-overlapping match of ``pattern`` in ``text``, left to right.

    Missing or non-participating groups are returned as empty strings.
    Line and column of each match start are 0-based.
    """
    line = 0
    line_start = 0
    scanned = 0
    for match in pattern.finditer(text):
        start = match.start()
        # Count newlines between the previous match start and this one
        newlines = text.count("\n", scanned, start)
        if newlines:
            line += newlines
            line_start = text.rfind("\n", scanned, start) + 1
        scanned = start
        yield RawMatch(
            group1=_group(match, 1),
            group2=_group(match, 2),
            group3=_group(match, 3),
            match_start=start,
            match_end=match.end(),
            matched_text=match.group(0),
            line=line,
            column=start - line_start,
        )


def extract_document(document: SourceDocument, pattern: re.Pattern) -> List[TaskRecord]:
    """Extract dated task records from one document, in text order.

    A match that fails to become a record is logged and skipped; the remaining
    matches of the document are still processed.
    """
    records: List[TaskRecord] = []
    discarded = 0
    for raw in extract_matches(document.text, pattern):
        try:
            due_date = parse_date(raw.group2.strip())
            tag = raw.group3.strip()
            if due_date is None or not tag:
                discarded += 1
                continue
            records.append(
                create_task_record(
                    text=raw.group1,
                    date_text=raw.group2,
                    due_date=due_date,
                    tag=tag,
                    source_id=document.source_id,
                    source_label=document.source_label,
                    line=raw.line,
                    column=raw.column,
                    offset_start=raw.match_start,
                    offset_end=raw.match_end,
                )
            )
        except Exception as e:
            discarded += 1
            logger.warning(
                f"Skipped task at {document.source_id}:{raw.line + 1}: {type(e).__name__}: {str(e)}"
            )
    if discarded:
        logger.debug(f"Discarded {discarded} undated matches in {document.source_id}")
    return records


def extract_tasks(documents: Iterable[SourceDocument], pattern: re.Pattern) -> List[TaskRecord]:
    """Extract task records from every document, in caller order.

    A document that fails to scan is logged and skipped; the rest are still
    processed.
    """
    records: List[TaskRecord] = []
    for document in documents:
        try:
            records.extend(extract_document(document, pattern))
        except Exception as e:
            logger.error(f"Failed to extract tasks from {document.source_id}: {type(e).__name__}: {str(e)}")
    logger.debug(f"Extracted {len(records)} tasks")
    return records
