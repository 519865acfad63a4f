"""
Store tests.

1. test_store_actions.py    - action methods, filtered view, get_item
2. test_store_subscribe.py  - subscribers and dispatch of dicts
3. test_store_key_checks.py - key diagnostics at construction, strict mode
"""
