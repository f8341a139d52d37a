"""
partialjson streaming support.

This module re-parses accumulated chunks of a JSON stream.
"""

from .processor import StreamingParser, StreamSnapshot, parse_chunks

__all__ = ['StreamingParser', 'StreamSnapshot', 'parse_chunks']
