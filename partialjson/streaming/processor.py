"""
Streaming helper for JSON that arrives in chunks.

The parser keeps only the accumulated text. Every chunk triggers a fresh
parse of the whole buffer, so callers always see the best value available so
far together with a flag telling whether the document is already complete.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from ..core.engine import parse_with_status
from ..core.options import Allow
from ..security.exceptions import ParseError
from ..utils.config import ParseConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamSnapshot:
    """Result of parsing the buffer after a chunk was fed."""

    value: Any = None
    complete: bool = False
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        """Whether a value could be recovered from the buffer."""
        return self.error is None


class StreamingParser:
    """Accumulates chunks and re-parses the full buffer after each one."""

    def __init__(
        self,
        allow: Optional[Allow] = None,
        *,
        config: Optional[ParseConfig] = None,
    ):
        self.config = config or ParseConfig()
        self.allow = self.config.allow if allow is None else Allow(allow)
        self.logger = self.config.logger or logger
        self._buffer = ""
        self._snapshot = StreamSnapshot()

    @property
    def buffer(self) -> str:
        """Text received so far."""
        return self._buffer

    @property
    def snapshot(self) -> StreamSnapshot:
        """Result of the most recent feed()."""
        return self._snapshot

    def feed(self, chunk: str) -> StreamSnapshot:
        """Append a chunk and parse the accumulated buffer."""
        self._buffer += chunk
        self._snapshot = self._parse_buffer()
        return self._snapshot

    def reset(self) -> None:
        """Discard the buffer and the last snapshot."""
        self._buffer = ""
        self._snapshot = StreamSnapshot()

    def _parse_buffer(self) -> StreamSnapshot:
        try:
            complete, value = parse_with_status(
                self._buffer, self.allow, config=self.config
            )
        except ParseError as error:
            self.logger.debug(
                "Buffer of %d chars not parseable yet: %s",
                len(self._buffer),
                error.message,
            )
            return StreamSnapshot(error=error)

        if not complete:
            self.logger.debug("Parsed partial buffer of %d chars", len(self._buffer))
        return StreamSnapshot(value=value, complete=complete)


def parse_chunks(
    chunks: Iterable[str],
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Iterator[StreamSnapshot]:
    """Yield a snapshot for every chunk of a JSON stream."""
    parser = StreamingParser(allow, config=config)
    for chunk in chunks:
        yield parser.feed(chunk)
