"""
Array primitive tests.

1. test_array_insert.py - insert: clamping, empty values, identity
2. test_array_move.py   - move: ordering, invalid indices, ties with the target
"""
