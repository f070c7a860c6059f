"""
NeuroMemo Test Suite

Test Structure:
    tests/
    ├── conftest.py              # Shared fixtures (sample catalog, fixed time)
    └── unit/                    # Unit tests (pure, no I/O beyond config files)
        ├── test_catalog.py      # Catalog load, lookups, search, traversal
        ├── test_sm2.py          # SM-2 review scheduling
        ├── test_due_selection.py
        ├── test_difficulty.py
        ├── test_scoring.py
        └── ...

Running Tests:
    pytest tests/unit
"""
