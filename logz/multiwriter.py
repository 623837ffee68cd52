"""
MultiWriter - Broadcast one stream to several destinations

Behaves like a single writable stream while duplicating every write to each
destination it wraps. A failing destination never affects its siblings or
the caller: the write is reported as fully successful regardless.

Usage:
    from logz.multiwriter import multi_writer

    out = multi_writer(sys.stdout, FileDestination("/var/log/app.log"))
    out.write("Log entry\n")
"""

from typing import Any, List


class MultiWriter:
    """
    Write to multiple destinations simultaneously.

    Never holds another MultiWriter: nested writers are flattened at
    construction so a broadcast only touches leaf destinations.

    Example:
        writer = multi_writer(sys.stdout, log_file)
        writer.write("Log entry\n")
    """

    def __init__(self, writers: List[Any]):
        """
        Initialize multi writer.

        Args:
            writers: Destinations or MultiWriters, in broadcast order
        """
        self.writers = []
        for writer in writers:
            if isinstance(writer, MultiWriter):
                self.writers.extend(writer.writers)
            else:
                self.writers.append(writer)

    def write(self, data) -> int:
        """
        Write data to all destinations.

        Args:
            data: Content to write (str or bytes, passed through untouched)

        Returns:
            len(data), whatever the individual destinations did
        """
        for writer in self.writers:
            try:
                writer.write(data)
            except Exception:
                # Continue writing to other destinations even if one fails
                pass
        return len(data)

    def flush(self):
        """Flush all destinations that support it"""
        for writer in self.writers:
            flush = getattr(writer, "flush", None)
            if flush is None:
                continue
            try:
                flush()
            except Exception:
                pass


def multi_writer(*writers) -> MultiWriter:
    """
    Compose destinations into one MultiWriter.

    A MultiWriter argument contributes its own destinations instead of being
    nested, so composing the result of ``multi_writer`` again stays flat.

    Args:
        *writers: Destinations or MultiWriters

    Returns:
        New MultiWriter over the flattened destinations

    Example:
        both = multi_writer(sys.stdout, log_file)
        all_three = multi_writer(both, audit_file)  # 3 leaves, not nested
    """
    return MultiWriter(list(writers))
