"""
partialjson demonstration script.
"""

import partialjson
from partialjson import Allow


def main():
    print("partialjson - Partial JSON Parser Demo")
    print("=" * 40)

    examples = [
        # Truncated string value
        ('{"name": "Alice", "bio": "Loves hiking and', "Truncated string"),
        # Dangling key
        ('{"field": true, "field2"', "Dangling key"),
        # Nested structures
        ('{"users": [{"id": 1}, {"id": 2', "Nested objects in an array"),
        # Number that may still grow
        ("[2, 3, 4", "Trailing number in an array"),
        # Truncated literal
        ('{"ok": tr', "Truncated literal"),
        # Unfinished escape sequence
        ('"caf\\u00', "Dangling unicode escape"),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str}")

        try:
            result = partialjson.parse(json_str)
            print(f"Output: {result}")
        except partialjson.ParseError as e:
            print(f"Error:  {e}")

    # The same input under different tolerance settings
    print(f"\n{len(examples) + 1}. One input, several Allow settings")
    json_str = '{"progress": 0.'
    print(f"Input:  {json_str}")
    for name, allow in [
        ("ALL", Allow.ALL),
        ("ALL_EXCEPT_NUMBERS", Allow.ALL_EXCEPT_NUMBERS),
        ("NONE", Allow.NONE),
    ]:
        try:
            print(f"  {name:<20} {partialjson.parse(json_str, allow)}")
        except partialjson.ParseError as e:
            print(f"  {name:<20} {type(e).__name__}: {e.message}")


if __name__ == "__main__":
    main()
