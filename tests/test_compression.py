"""Tests for the gzip upload stream."""

import gzip
import io
import os

import pytest

from s3uploader.storage.compression import GzipStream


class TestGzipStream:
    """Tests for GzipStream."""

    def test_read_all(self):
        """Test reading the whole stream produces valid gzip."""
        body = GzipStream(io.BytesIO(b"hello world" * 100))

        data = body.read()

        assert data[:2] == b"\x1f\x8b"
        assert gzip.decompress(data) == b"hello world" * 100
        assert body.read() == b""

    def test_bytes_source(self):
        """Test raw bytes are accepted as a source."""
        body = GzipStream(b"payload")

        assert gzip.decompress(body.read()) == b"payload"

    def test_empty_source(self):
        """Test an empty source still produces a valid gzip member."""
        body = GzipStream(io.BytesIO(b""))

        assert gzip.decompress(body.read()) == b""

    def test_read_in_chunks(self):
        """Test sized reads reassemble into the full stream."""
        content = bytes(range(256)) * 1000
        body = GzipStream(io.BytesIO(content), chunk_size=1024)

        parts = []
        while True:
            part = body.read(100)
            if not part:
                break
            assert len(part) <= 100
            parts.append(part)

        assert gzip.decompress(b"".join(parts)) == content

    def test_iteration(self):
        """Test iterating yields compressed chunks."""
        content = b"abc" * 50_000
        body = GzipStream(io.BytesIO(content), chunk_size=4096)

        assert gzip.decompress(b"".join(body)) == content

    def test_source_read_lazily(self):
        """Test the source is consumed one chunk at a time."""
        source = io.BytesIO(os.urandom(1024 * 1024))
        body = GzipStream(source, chunk_size=1000)

        body.read(1)

        assert source.tell() < 1024 * 1024

    def test_close_leaves_source_open(self):
        """Test closing the wrapper does not close the source."""
        source = io.BytesIO(b"data")
        with GzipStream(source) as body:
            body.read()

        assert body.closed
        assert not source.closed

    def test_read_after_close(self):
        """Test reading a closed stream raises."""
        body = GzipStream(b"data")
        body.close()

        with pytest.raises(ValueError):
            body.read()
