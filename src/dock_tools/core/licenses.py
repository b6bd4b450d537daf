"""Markdown license overview for the firmware's third-party components."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from dock_tools.core.files import ensure_file_exists
from dock_tools.models import LicenseEntry

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "licenses-header.md"
FOOTER_TEMPLATE = "licenses-footer.md"
PROJECT_LICENSE_TITLE = "Dock 3 firmware license"

_MANIFEST_ADAPTER = TypeAdapter(dict[str, LicenseEntry])


@dataclass(frozen=True)
class LicenseReport:
    path: Path
    modules: int
    embedded: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def load_license_manifest(path: Path) -> dict[str, LicenseEntry]:
    ensure_file_exists(path)
    try:
        return _MANIFEST_ADAPTER.validate_json(path.read_bytes())
    except ValidationError as exc:
        raise ValueError(f"Invalid license manifest {path}: {exc}") from None


def _fenced(text: str) -> str:
    return "```\n" + text.strip() + "\n```\n\n"


def render_license_report(
    licenses: Mapping[str, LicenseEntry],
    header: str,
    footer: str,
    base_dir: Path,
    project_license: str | None = None,
) -> tuple[str, list[str], list[str]]:
    """Render the overview document.

    Returns (markdown, embedded, missing) where ``embedded`` and ``missing``
    list the modules with and without a readable license file.
    """
    parts = [header]

    for module, entry in licenses.items():
        logger.info("%s: %s", module, entry.license)
        parts.append(f"- {module} - {entry.license}\n")
    parts.append("\n")

    if project_license is not None:
        parts.append(f"### {PROJECT_LICENSE_TITLE}\n\n")
        parts.append(_fenced(project_license))

    embedded: list[str] = []
    missing: list[str] = []
    for module, entry in licenses.items():
        parts.append(f"### {module} @ {entry.version}\n\n")
        if entry.description:
            parts.append(f"{entry.description}  \n")
        parts.append(f"- {entry.license}\n")
        parts.append(f"- {entry.repository}\n")

        license_path = base_dir / module / (entry.license_file or "")
        if not entry.license_file or not license_path.is_file():
            logger.error('%s (%s) no license file found! "%s"', module, entry.license, license_path)
            missing.append(module)
            continue

        parts.append("\n#### License\n\n")
        parts.append(_fenced(license_path.read_text(encoding="utf-8", errors="replace")))
        embedded.append(module)

    parts.append(footer)
    return "".join(parts), embedded, missing


def generate_license_report(
    manifest_path: Path,
    output_path: Path,
    base_dir: Path,
    templates_dir: Path,
    project_license_path: Path | None = None,
) -> LicenseReport:
    """Write the license overview for ``manifest_path`` to ``output_path``.

    All required inputs are checked before the output file is touched.
    """
    licenses = load_license_manifest(manifest_path)

    header_path = templates_dir / HEADER_TEMPLATE
    footer_path = templates_dir / FOOTER_TEMPLATE
    ensure_file_exists(header_path)
    ensure_file_exists(footer_path)

    project_license = None
    if project_license_path is not None:
        ensure_file_exists(project_license_path)
        project_license = project_license_path.read_text(encoding="utf-8", errors="replace")

    markdown, embedded, missing = render_license_report(
        licenses,
        header_path.read_text(encoding="utf-8"),
        footer_path.read_text(encoding="utf-8"),
        base_dir,
        project_license,
    )
    output_path.write_text(markdown, encoding="utf-8")

    return LicenseReport(path=output_path, modules=len(licenses), embedded=embedded, missing=missing)
