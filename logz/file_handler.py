"""
File Handler - Append-only file destination for logz

Features:
- Thread-safe write operations
- Automatic directory creation
- Lazy open, idempotent close

Usage:
    from logz.file_handler import FileDestination

    out = FileDestination("/var/log/app/app.log")
    logz.init(out, LogLevel.INFO, LogLevel.WARNING, LogLevel.CRITICAL)
    ...
    logz.close()  # closes out
"""

from pathlib import Path
from threading import Lock


class FileDestination:
    """
    Text file opened in append mode on first write.

    Example:
        with FileDestination("/var/log/app/app.log") as out:
            out.write("Log entry\n")
    """

    def __init__(self, filepath: str, encoding: str = "utf-8"):
        """
        Initialize file destination.

        Args:
            filepath: Path to log file
            encoding: File encoding (default: utf-8)
        """
        self.filepath = Path(filepath)
        self.encoding = encoding
        self._file = None
        self._lock = Lock()
        self._ensure_directory()

    def _ensure_directory(self):
        """Create log directory if it doesn't exist"""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def write(self, content: str) -> int:
        """
        Append content to the file.

        Args:
            content: Content to write (should include newline if needed)

        Returns:
            Number of characters written
        """
        with self._lock:
            if self._file is None or self._file.closed:
                self._file = open(self.filepath, "a", encoding=self.encoding)
            written = self._file.write(content)
            self._file.flush()
            return written

    def flush(self):
        with self._lock:
            if self._file and not self._file.closed:
                self._file.flush()

    def close(self):
        """Flush and close the file handle. Safe to call more than once."""
        with self._lock:
            if self._file and not self._file.closed:
                self._file.flush()
                self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
