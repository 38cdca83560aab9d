"""Shared pytest configuration for the bstreelib test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large degenerate-tree tests, skipped by run_tests.py unless --all"
    )
