"""Reading manifest files from disk."""

import json
from pathlib import Path
from typing import Any

from cemchangelog.core.errors import ManifestError
from cemchangelog.core.logging import get_logger

log = get_logger("manifest.loader")


def load_manifest(path: Path) -> Any:
    """Parse a JSON manifest file.

    Raises:
        ManifestError: If the file is missing or not valid JSON.
    """
    if not path.is_file():
        raise ManifestError.file_not_found(str(path))
    try:
        with path.open(encoding="utf-8") as f:
            manifest = json.load(f)
    except json.JSONDecodeError as e:
        raise ManifestError.parse_error(str(path), str(e)) from e
    log.debug("manifest_loaded", path=str(path))
    return manifest
