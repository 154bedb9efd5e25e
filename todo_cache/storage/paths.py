"""Document directory resolution and atomic file writes"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..errors import DirectoryUnresolvable
from ..interfaces.path_resolver import IPathResolver

logger = logging.getLogger(__name__)


class DocumentDirectoryResolver(IPathResolver):
    """Resolves logical file names against the user's document directory"""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        # Public: explicit base directory (None = settings, then ~/Documents)
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def document_directory(self) -> Path:
        """
        Determine and create the storage directory.

        Returns:
            Existing directory path

        Raises:
            DirectoryUnresolvable: if no directory can be determined or created
        """
        base = self.base_dir or settings.document_dir
        if base is None:
            try:
                base = Path.home() / "Documents"
            except RuntimeError as exc:
                raise DirectoryUnresolvable("Cannot determine home directory") from exc

        base = Path(base).expanduser()
        try:
            base.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryUnresolvable(path=base) from exc

        if not base.is_dir():
            raise DirectoryUnresolvable("Storage location is not a directory", path=base)
        return base

    def resolve(self, name: Union[str, Path]) -> Path:
        path = Path(name)
        if path.is_absolute():
            return path
        return self.document_directory() / path


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    Write text to a file so readers see either the old or the new content.

    The data goes to a temporary file in the same directory, which then
    replaces the target.

    Args:
        path: Destination file
        text: Full file content
        encoding: Text encoding

    Raises:
        OSError: if the temporary file cannot be written or moved
        UnicodeEncodeError: if text cannot be encoded
    """
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logger.debug(f"Wrote {len(text)} characters to {path}")
