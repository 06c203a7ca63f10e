"""Writer for generated SVG documents.

This module provides the LogoWriter class, the only place where rendered
documents leave the process. Documents are written unchanged.
"""

from pathlib import Path
from typing import TextIO

from csslogo.exceptions import LogoSaveError


class LogoWriter:
    """Writes rendered documents into an output directory.

    Example:
        writer = LogoWriter(Path("out"))
        writer.write("css.svg", render_logo(config))
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the writer.

        Args:
            output_dir: Directory receiving the files (created on first write)
        """
        self._output_dir = output_dir

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def path_for(self, filename: str) -> Path:
        """Resolve a filename inside the output directory."""
        return self._output_dir / filename

    def write(self, filename: str, document: str) -> Path:
        """Write a document as UTF-8 text.

        Args:
            filename: Target filename (e.g. "css.svg")
            document: Rendered SVG text

        Returns:
            Path of the written file

        Raises:
            LogoSaveError: If the directory or file cannot be written
        """
        path = self.path_for(filename)
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise LogoSaveError(str(path), e.strerror or str(e)) from e
        return path

    @staticmethod
    def write_stream(document: str, stream: TextIO) -> None:
        """Write a document to a text stream such as standard output."""
        stream.write(document)
        stream.flush()
