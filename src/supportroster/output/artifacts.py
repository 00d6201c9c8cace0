"""Writing generated artifacts to disk."""

import logging
from pathlib import Path
from typing import Union

from supportroster.errors import OutputWriteError

logger = logging.getLogger(__name__)


def write_artifact(path: Union[str, Path], content: Union[str, bytes]) -> Path:
    """Write text (UTF-8) or bytes to path, replacing any existing file.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    path = Path(path)
    try:
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"cannot write {path}: {exc}") from exc

    logger.info("Wrote %s", path)
    return path
