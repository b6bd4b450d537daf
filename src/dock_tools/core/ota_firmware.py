"""Firmware metadata file included in the hawkBit deployment of a release."""

import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path

from dock_tools.core.files import ensure_file_exists
from dock_tools.models import FirmwareMetadata

logger = logging.getLogger(__name__)

RELEASE_NOTES_PATTERN = re.compile(r"release-notes_([a-z]{2})\.md")


def find_release_notes(release_notes_dir: Path) -> dict[str, Path]:
    """Map two-letter language codes to release-notes files, in file name order."""
    if not release_notes_dir.is_dir():
        logger.warning("Release notes directory not found: %s", release_notes_dir)
        return {}

    notes: dict[str, Path] = {}
    for path in sorted(release_notes_dir.iterdir()):
        match = RELEASE_NOTES_PATTERN.fullmatch(path.name)
        if match and path.is_file():
            notes[match.group(1)] = path
    logger.info("Including release notes: %s", [p.name for p in notes.values()])
    return notes


def build_firmware_metadata(
    firmware: Path,
    version: str,
    channel: str,
    release_notes_dir: Path,
    today: date | None = None,
) -> FirmwareMetadata:
    ensure_file_exists(firmware)
    release_date = today or datetime.now(timezone.utc).date()

    metadata = FirmwareMetadata(
        version=version,
        channel=channel,
        release_date=release_date.isoformat(),
        size=firmware.stat().st_size,
    )
    for lang, path in find_release_notes(release_notes_dir).items():
        logger.info("Processing release note language: %s", lang)
        metadata.description[lang] = path.read_text(encoding="utf-8", errors="replace")
    return metadata


def write_firmware_metadata(
    firmware: Path,
    version: str,
    channel: str,
    output: Path,
    release_notes_dir: Path,
    today: date | None = None,
) -> FirmwareMetadata:
    metadata = build_firmware_metadata(firmware, version, channel, release_notes_dir, today)
    output.write_text(metadata.model_dump_json(indent=2), encoding="utf-8")
    return metadata
