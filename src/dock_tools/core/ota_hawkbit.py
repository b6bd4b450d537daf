"""hawkBit DDI software deployment object for the UC OTA server."""

import logging
from collections.abc import Sequence
from pathlib import Path

from dock_tools.core.files import ensure_file_exists
from dock_tools.models import Artifact, ArtifactHashes, ArtifactLinks, Deployment, DeploymentChunk, Link

logger = logging.getLogger(__name__)

DEPLOYMENT_FILE = "deployment.json"

# Placeholders are substituted by the deployment pipeline, not here.
HREF_PREFIX = "${UC_DOWNLOAD_URL}${UC_OTA_TENANT}/${ARTIFACT_PATH}/"

MD5_SUFFIX = ".MD5SUM"
SHA1_SUFFIX = ".sha1sum"
SHA256_SUFFIX = ".sha256sum"


def read_hash_file(path: Path) -> str:
    """Return the checksum from a ``*sum`` style sidecar (``<hash>  <name>``)."""
    tokens = path.read_text(encoding="utf-8").split(maxsplit=1)
    if not tokens:
        raise ValueError(f"Invalid hash file: {path}")
    return tokens[0]


def _sidecars(deployment_file: str) -> tuple[Path, Path, Path]:
    return (
        Path(deployment_file + MD5_SUFFIX),
        Path(deployment_file + SHA1_SUFFIX),
        Path(deployment_file + SHA256_SUFFIX),
    )


def check_deployment_files(deployment_files: Sequence[str]) -> None:
    for deployment_file in deployment_files:
        ensure_file_exists(Path(deployment_file))
        for sidecar in _sidecars(deployment_file):
            ensure_file_exists(sidecar)


def build_artifact(deployment_file: str) -> Artifact:
    md5_file, sha1_file, sha256_file = _sidecars(deployment_file)
    logger.info("Including deployment file: %s", deployment_file)
    return Artifact(
        filename=deployment_file,
        hashes=ArtifactHashes(
            sha1=read_hash_file(sha1_file),
            md5=read_hash_file(md5_file),
            sha256=read_hash_file(sha256_file),
        ),
        size=Path(deployment_file).stat().st_size,
        links=ArtifactLinks(
            download=Link(href=HREF_PREFIX + deployment_file),
            md5sum=Link(href=HREF_PREFIX + deployment_file + MD5_SUFFIX),
        ),
    )


def build_deployment(version: str, deployment_files: Sequence[str]) -> Deployment:
    """Build the deployment with one artifact per file, in the given order.

    Every file and its three sidecars must exist before anything is read.
    """
    if not deployment_files:
        raise ValueError("At least one deployment file is required")
    check_deployment_files(deployment_files)

    chunk = DeploymentChunk(version=version)
    for deployment_file in deployment_files:
        chunk.artifacts.append(build_artifact(deployment_file))
    return Deployment(chunks=[chunk])


def write_deployment(version: str, deployment_files: Sequence[str], output: Path) -> Deployment:
    deployment = build_deployment(version, deployment_files)
    output.write_text(deployment.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
    return deployment
