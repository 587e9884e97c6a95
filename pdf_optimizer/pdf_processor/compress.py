"""Ghostscript adapter producing compressed PDF renditions."""

import subprocess
from pathlib import Path
from typing import List

from ..middleware.exceptions import CompressionError, CompressionTimeoutError
from ..middleware.logging import logger

DEFAULT_RESOLUTION = 150
DEFAULT_TIMEOUT_SECONDS = 600


class GhostscriptCompressor:
    """Compress PDF files with a blocking Ghostscript ``pdfwrite`` run.

    Fonts stay embedded, color images are downsampled to a fixed resolution
    and page auto-rotation is disabled so page geometry is unchanged.
    """

    def __init__(
        self,
        binary: str = "gs",
        resolution: int = DEFAULT_RESOLUTION,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.binary = binary
        self.resolution = resolution
        self.timeout_seconds = timeout_seconds

    def command(self, input_path: Path, output_path: Path) -> List[str]:
        return [
            self.binary,
            "-dEmbedAllFonts=true",
            "-sDEVICE=pdfwrite",
            "-dCompatibilityLevel=1.4",
            "-dDownsampleColorImages=true",
            f"-dColorImageResolution={self.resolution}",
            "-dNOPAUSE",
            "-dQUIET",
            "-dBATCH",
            "-dAutoRotatePages=/None",
            f"-sOutputFile={output_path}",
            str(input_path),
        ]

    def compress(self, input_path: Path, output_path: Path) -> None:
        """
        Write a compressed rendition of ``input_path`` to ``output_path``.

        Args:
            input_path (Path): The PDF to compress.
            output_path (Path): Where the compressed PDF is written.

        Raises:
            CompressionTimeoutError: If Ghostscript runs longer than the timeout.
            CompressionError: If Ghostscript fails or produces no output.
        """
        cmd = self.command(input_path, output_path)
        logger.debug("Running Ghostscript", extra={"command": cmd})

        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            raise CompressionTimeoutError(
                timeout_seconds=self.timeout_seconds,
                details={"input": str(input_path)},
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "")[-4000:]
            raise CompressionError(
                f"Ghostscript exited with status {e.returncode}",
                details={"input": str(input_path), "stderr": stderr},
            ) from e
        except OSError as e:
            raise CompressionError(
                f"Failed to run Ghostscript: {e}",
                details={"binary": self.binary},
            ) from e

        if not output_path.exists() or output_path.stat().st_size == 0:
            raise CompressionError(
                "Ghostscript produced no output",
                details={"input": str(input_path), "output": str(output_path)},
            )
