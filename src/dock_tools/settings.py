import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_AUTH_TOKEN = "0000"
DEFAULT_TEMPLATES_DIR = "_templates"
DEFAULT_RELEASE_NOTES_DIR = "../../../doc/release"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    auth_token: str
    templates_dir: Path
    release_notes_dir: Path
    project_license: Path | None
    log_level: str


def get_settings() -> Settings:
    """Read path and token conventions, overridable through the environment."""
    project_license = os.getenv("DOCK_TOOLS_PROJECT_LICENSE")
    return Settings(
        auth_token=os.getenv("DOCK_AUTH_TOKEN", DEFAULT_AUTH_TOKEN),
        templates_dir=Path(os.getenv("DOCK_TOOLS_TEMPLATES_DIR", DEFAULT_TEMPLATES_DIR)),
        release_notes_dir=Path(os.getenv("DOCK_TOOLS_RELEASE_NOTES_DIR", DEFAULT_RELEASE_NOTES_DIR)),
        project_license=Path(project_license) if project_license else None,
        log_level=os.getenv("DOCK_TOOLS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
