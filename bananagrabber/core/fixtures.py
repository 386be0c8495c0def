"""Run saved Reddit responses through decode and classification, without the network."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from bananagrabber.core.classifier import scan_for_media
from bananagrabber.errors import DecodeError, UnexpectedShape
from bananagrabber.models.api import PostInfo, decode_api_response, get_post_from_response
from bananagrabber.models.media import PostMediaSource

logger = logging.getLogger(__name__)


@dataclass
class FixtureReport:
    """Outcome for one saved response."""

    path: Path
    post: Optional[PostInfo] = None
    source: Optional[PostMediaSource] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def check_saved_response(path: Path) -> FixtureReport:
    """Decode, extract and classify one file; failures are recorded on the report."""
    report = FixtureReport(path=path)

    try:
        raw = path.read_bytes()
        report.post = get_post_from_response(decode_api_response(raw))
    except (OSError, DecodeError, UnexpectedShape) as e:
        logger.warning(f"{path}: {e}")
        report.error = str(e)
        return report

    logger.info(f"{path}: {report.post!r}")
    report.source = scan_for_media(report.post)
    logger.info(f"{path}: media {report.source!r}")
    return report


def check_saved_responses(directory: Union[str, Path]) -> List[FixtureReport]:
    """
    Check every file in ``directory``, continuing past files that fail.

    Raises:
        FileNotFoundError: If ``directory`` does not exist or is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Not a directory: {directory}")

    reports = []
    for path in sorted(p for p in directory.iterdir() if p.is_file()):
        logger.info(f"begin {path}")
        reports.append(check_saved_response(path))

    failed = sum(1 for r in reports if not r.ok)
    logger.info(f"Checked {len(reports)} saved responses, {failed} failed")
    return reports
