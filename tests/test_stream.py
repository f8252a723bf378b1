"""
Unit tests for snapshot streaming.

Tests iter_snapshots and aiter_snapshots over chunked input.
"""

import asyncio

import pytest

from basket_json import StructuralRejectError, aiter_snapshots, iter_snapshots

CHUNKS = ['{"name":"John","a', 'ge":30,"city":"New', ' York"}']


class TestIterSnapshots:
    """Tests for the synchronous snapshot iterator."""

    def test_snapshot_per_chunk(self):
        """Test one snapshot is produced for every chunk."""
        snapshots = list(iter_snapshots(CHUNKS))
        assert snapshots == [
            {"name": "John", "a": None},
            {"name": "John", "age": 30.0, "city": "New"},
            {"name": "John", "age": 30.0, "city": "New York"},
        ]

    def test_leading_whitespace_chunks_skipped(self):
        """Test chunks before the value starts produce nothing."""
        snapshots = list(iter_snapshots(["  ", "\n", "[1", ", 2]"]))
        assert snapshots == [[1.0], [1.0, 2.0]]

    def test_options_forwarded(self):
        """Test option overrides reach the parser."""
        snapshots = list(iter_snapshots(['"a\n', 'b"'], allow_control_characters=True))
        assert snapshots == ["a\n", "a\nb"]

    def test_parse_error_propagates(self):
        """Test structural errors surface from the iterator."""
        with pytest.raises(StructuralRejectError):
            list(iter_snapshots(["{", "]"]))


class TestAiterSnapshots:
    """Tests for the async snapshot iterator."""

    @pytest.mark.asyncio
    async def test_async_chunks(self):
        """Test snapshots from an async chunk source."""

        async def deltas():
            for chunk in CHUNKS:
                await asyncio.sleep(0)
                yield chunk

        snapshots = []
        async for snapshot in aiter_snapshots(deltas()):
            snapshots.append(snapshot)

        assert snapshots[-1] == {"name": "John", "age": 30.0, "city": "New York"}
        assert len(snapshots) == len(CHUNKS)

    @pytest.mark.asyncio
    async def test_async_trailing_ignored(self):
        """Test the trailing policy applies to async sources."""

        async def deltas():
            yield "[true]"
            yield " and then some"

        snapshots = [s async for s in aiter_snapshots(deltas(), trailing="ignore")]
        assert snapshots == [[True], [True]]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
