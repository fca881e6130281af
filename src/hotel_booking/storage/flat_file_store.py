"""Line-oriented file store for the rooms and reservations streams."""

from pathlib import Path

from structlog import get_logger

from hotel_booking.exceptions import PersistenceError

logger = get_logger(__name__)


class FlatFileStore:
    """Reads and overwrites whole text files, one record per line."""

    def __init__(self, encoding: str = "utf-8"):
        """Initialize the store.

        Args:
            encoding: Text encoding used for reads and writes
        """
        self.encoding = encoding

    def read_lines(self, path: Path) -> list[str]:
        """Read every line of a file.

        A missing file is not an error: it reads as an empty stream.

        Args:
            path: File to read

        Returns:
            Lines without their line terminators

        Raises:
            PersistenceError: If the file exists but cannot be read
        """
        if not path.exists():
            logger.info("File not found, treating as empty", path=str(path))
            return []

        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read file", path=str(path), error=str(e))
            raise PersistenceError(f"Could not read {path}: {e}") from e

        lines = content.splitlines()
        logger.debug("Read file", path=str(path), line_count=len(lines))
        return lines

    def write_lines(self, path: Path, lines: list[str]) -> None:
        """Overwrite a file with the given lines.

        There is no append mode and no backup of the previous content.

        Args:
            path: File to write
            lines: Lines to write, without line terminators

        Raises:
            PersistenceError: If the file cannot be written
        """
        body = "".join(f"{line}\n" for line in lines)
        try:
            path.write_text(body, encoding=self.encoding)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Failed to write file", path=str(path), error=str(e))
            raise PersistenceError(f"Could not write {path}: {e}") from e

        logger.info("Wrote file", path=str(path), line_count=len(lines))
