"""
Reducer tests.

1. test_reducer_happy_path.py - every action applied to a populated list
2. test_reducer_noops.py      - transitions that hand back the input state
3. test_reducer_selection.py  - selection across remove/remove_selected
4. test_reducer_replay.py     - replay, dict actions, purity
"""
