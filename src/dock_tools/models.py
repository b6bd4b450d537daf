from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CodeFormat = Literal["hex", "gc", "pronto"]


class LicenseEntry(BaseModel):
    license: str = Field(alias="License")
    repository: str = Field(alias="Repository")
    version: str = Field(alias="Version")
    description: str | None = Field(default=None, alias="Description")
    license_file: str | None = Field(default=None, alias="licenseFile")


class AuthMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["auth"] = "auth"
    token: str


class DockCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["dock"] = "dock"
    id: int = 0
    command: str


class IrSendCommand(DockCommand):
    command: Literal["ir_send"] = "ir_send"
    code: str
    format: CodeFormat
    repeat: int | None = None
    int_side: bool = True
    int_top: bool = False
    ext1: bool = True
    ext2: bool = True


class IrStopCommand(DockCommand):
    command: Literal["ir_stop"] = "ir_stop"


class FirmwareMetadata(BaseModel):
    id: str = "$replaced_by_core"
    title: str = "Dock 3 firmware"
    description: dict[str, str] = Field(default_factory=lambda: {"en": "New release"})
    version: str
    channel: str
    release_date: str
    size: int


class ArtifactHashes(BaseModel):
    sha1: str
    md5: str
    sha256: str


class Link(BaseModel):
    href: str


class ArtifactLinks(BaseModel):
    download: Link
    md5sum: Link


class Artifact(BaseModel):
    filename: str
    hashes: ArtifactHashes
    size: int
    links: ArtifactLinks = Field(serialization_alias="_links")


class DeploymentChunk(BaseModel):
    part: str = "dock"
    version: str
    name: str = "Dock 3 firmware"
    artifacts: list[Artifact] = Field(default_factory=list)


class Deployment(BaseModel):
    download: str = "attempt"
    update: str = "skip"
    maintenance_window: str = Field(default="unavailable", serialization_alias="maintenanceWindow")
    chunks: list[DeploymentChunk]
