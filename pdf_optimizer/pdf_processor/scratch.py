"""Scoped scratch files for per-asset intermediates."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple

from ..middleware.logging import logger
from ..utils.keys import compressed_file_name


def _unlink(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(
            "Failed to remove scratch file",
            extra={"path": str(path), "error": str(e)},
        )


@contextmanager
def scratch_files(scratch_dir: Path, file_name: str) -> Iterator[Tuple[Path, Path]]:
    """Yield the original and compressed scratch paths for one asset.

    Both files are removed when the block exits, whatever the outcome.

    Args:
        scratch_dir: Directory for intermediate files
        file_name: Source file name, reused for the downloaded original

    Yields:
        Tuple of (original path, compressed path)
    """
    original = scratch_dir / file_name
    compressed = scratch_dir / compressed_file_name(file_name)
    try:
        yield original, compressed
    finally:
        _unlink(original)
        _unlink(compressed)
