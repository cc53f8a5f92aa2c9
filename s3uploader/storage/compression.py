"""Streaming gzip compression for upload bodies."""

import zlib
from typing import BinaryIO, Iterator

# zlib wbits value selecting the gzip container format
GZIP_WBITS = 31
CHUNK_SIZE = 64 * 1024


class GzipStream:
    """Read-only file-like object yielding gzip bytes for a source stream.

    The source is read lazily, one chunk at a time, so large files are
    never held in memory uncompressed. Closing the wrapper does not close
    the source; the caller owns it.

    Example:
        with open("photo.jpg", "rb") as f:
            body = GzipStream(f)
            compressed = body.read()
    """

    def __init__(
        self,
        source: BinaryIO | bytes | bytearray,
        chunk_size: int = CHUNK_SIZE,
        level: int = 6,
    ):
        """Initialize the stream.

        Args:
            source: Binary readable or raw bytes to compress
            chunk_size: Number of bytes read from the source per step
            level: zlib compression level
        """
        if isinstance(source, (bytes, bytearray)):
            self._data: bytes | None = bytes(source)
            self._source = None
        else:
            self._data = None
            self._source = source
        self.chunk_size = chunk_size
        self._compressor = zlib.compressobj(level, zlib.DEFLATED, GZIP_WBITS)
        self._buffer = bytearray()
        self._eof = False
        self.closed = False

    def readable(self) -> bool:
        return True

    def _read_source(self) -> bytes:
        if self._data is not None:
            data, self._data = self._data, b""
            return data
        if self._source is None:
            return b""
        return self._source.read(self.chunk_size)

    def _fill(self, size: int) -> None:
        """Compress source data until ``size`` bytes are buffered or EOF."""
        while not self._eof and (size < 0 or len(self._buffer) < size):
            chunk = self._read_source()
            if chunk:
                self._buffer += self._compressor.compress(chunk)
            else:
                self._buffer += self._compressor.flush()
                self._eof = True

    def read(self, size: int = -1) -> bytes:
        """Read compressed bytes.

        Args:
            size: Maximum number of bytes to return (-1 for everything)

        Returns:
            Compressed bytes, or b"" once the stream is exhausted
        """
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        if size is None:
            size = -1
        self._fill(size)
        if size < 0:
            data = bytes(self._buffer)
            self._buffer.clear()
        else:
            data = bytes(self._buffer[:size])
            del self._buffer[:size]
        return data

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self.chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self) -> None:
        self.closed = True
        self._buffer.clear()

    def __enter__(self) -> "GzipStream":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
