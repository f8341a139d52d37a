"""
Streaming functionality demonstration for partialjson.
"""

import io

import partialjson
from partialjson import Allow, StreamingParser, parse_chunks


def main():
    print("partialjson - Streaming Features Demo")
    print("=" * 40)

    chunks = [
        '{"status',
        '": "loading",',
        ' "progress": 0.',
        '75, "items": [',
        '"item1", "item2"',
        "]}",
    ]

    # Example 1: Feeding chunks by hand
    print("\n1. StreamingParser.feed()")
    parser = StreamingParser()
    for chunk in chunks:
        snapshot = parser.feed(chunk)
        state = "complete" if snapshot.complete else "partial"
        print(f"  + {chunk!r:<22} -> {snapshot.value} ({state})")

    # Example 2: The same stream with partial numbers enabled
    print("\n2. parse_chunks() with Allow.ALL")
    for snapshot in parse_chunks(chunks, Allow.ALL):
        print(f"  {snapshot.value}")

    # Example 3: Errors are reported in the snapshot
    print("\n3. Strict stream with Allow.NONE")
    for snapshot in parse_chunks(["[1, ", "2, ", "3]"], Allow.NONE):
        if snapshot.ok:
            print(f"  value: {snapshot.value}")
        else:
            print(f"  waiting: {snapshot.error.message}")

    # Example 4: Reading a truncated file-like object
    print("\n4. load() from a truncated stream")
    stream = io.StringIO('{"message": "Hello from stream", "data": [1, 2, 3, 4')
    print(f"  {partialjson.load(stream)}")


if __name__ == "__main__":
    main()
