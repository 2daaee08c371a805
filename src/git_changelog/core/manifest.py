"""Project manifest discovery.

The manifest supplies the version being released and, optionally, the
homepage used to link each changelog entry to its commit. ``pyproject.toml``
is preferred; ``package.json`` is read when no pyproject exists.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from git_changelog.core.errors import ManifestError
from git_changelog.models.manifest import Manifest

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
PACKAGE_JSON = "package.json"


def read_manifest(project_root: Path) -> Manifest:
    """Load the manifest found in the project root."""
    project_root = Path(project_root)
    pyproject = project_root / PYPROJECT
    package_json = project_root / PACKAGE_JSON

    if pyproject.exists():
        data = _load_pyproject(pyproject)
    elif package_json.exists():
        data = _load_package_json(package_json)
    else:
        raise ManifestError(
            f"No {PYPROJECT} or {PACKAGE_JSON} found in {project_root}"
        )

    try:
        return Manifest(**data)
    except ValidationError as e:
        raise ManifestError(f"Invalid project manifest: {e}") from e


def _load_pyproject(path: Path) -> Dict[str, Any]:
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ManifestError(f"Could not read {path}: {e}") from e

    project = document.get("project", {})
    if "version" not in project:
        raise ManifestError(f"{path} has no static [project] version")

    logger.debug("Using manifest %s", path)
    return {
        "version": project["version"],
        "homepage": _find_homepage(project.get("urls", {})),
    }


def _load_package_json(path: Path) -> Dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"Could not read {path}: {e}") from e

    if not isinstance(document, dict) or "version" not in document:
        raise ManifestError(f"{path} has no version")

    logger.debug("Using manifest %s", path)
    return {"version": document["version"], "homepage": document.get("homepage")}


def _find_homepage(urls: Dict[str, str]) -> Optional[str]:
    # [project.urls] keys are free-form; match "Homepage", "homepage", etc.
    for key, value in urls.items():
        if key.lower().replace("-", "").replace("_", "") == "homepage":
            return value
    return None
