"""
Error reporting demonstration for partialjson.
"""

import partialjson
from partialjson import Allow, ParseConfig, ParseError, ParseLimits, SecurityError


def main():
    print("partialjson - Error Reporting Demo")
    print("=" * 45)

    # Example 1: Incomplete document with no tolerance
    print("\n1. Incomplete Document")
    try:
        partialjson.parse('{"key": "value"', Allow.NONE)
    except ParseError as e:
        print(f"{type(e).__name__} caught:")
        print(str(e))

    # Example 2: Malformed value with suggestions
    print("\n2. Malformed Value with Suggestions")
    try:
        partialjson.parse('{"enabled": True}', Allow.NONE)
    except ParseError as e:
        print(f"{type(e).__name__} caught:")
        print(str(e))

    # Example 3: Multiline JSON error
    print("\n3. Multiline JSON Error")
    multiline_json = """
    {
        "name": "John Doe",
        "age": 30,
        "city": 'New York'
    }
    """
    try:
        partialjson.parse(multiline_json, Allow.NONE)
    except ParseError as e:
        print(f"{type(e).__name__} caught:")
        print(str(e))

    # Example 4: Errors without context
    print("\n4. Errors without Context")
    config = ParseConfig(allow=Allow.NONE, include_context=False)
    try:
        partialjson.parse("[1, 2", config=config)
    except ParseError as e:
        print(str(e))

    # Example 5: Security limits
    print("\n5. Security Limits")
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=3))
    try:
        partialjson.parse("[[[[[1", config=config)
    except SecurityError as e:
        print(f"SecurityError caught: {e}")


if __name__ == "__main__":
    main()
