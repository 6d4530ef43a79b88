#!/usr/bin/env python
"""
Simple Test Runner for BinTreeLib
=================================

Runs all tests except slow ones.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --slow    # List the slow tests
    python run_tests.py --all     # Run everything including slow tests
    python run_tests.py --cov     # Add a coverage report
"""

import subprocess
import sys
import argparse
from pathlib import Path


SLOW_TESTS = [
    ("test_analytics.py::test_min_max_on_large_tree",
     "Checks the ratio search against a brute-force scan of 2,000 nodes",
     "Every node rescans its whole subtree, so the brute force is quadratic"),
]


def run_tests(include_slow=False, coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",
        "--durations=10",
        "-v",
    ]

    if coverage:
        cmd.extend(["--cov=bintreelib", "--cov-report=term-missing"])

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
    else:
        print("Running ALL tests including slow ones...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def show_slow_tests():
    """List the tests marked @pytest.mark.slow."""
    print("=" * 60)
    print("SLOW TESTS")
    print("=" * 60)

    for test_name, description, reason in SLOW_TESTS:
        print(f"\n* {test_name}")
        print(f"   Description: {description}")
        print(f"   Why slow: {reason}")

    print("\nRun them with:  python -m pytest -m slow -v")


def main():
    parser = argparse.ArgumentParser(description="Test runner for BinTreeLib")
    parser.add_argument("--slow", action="store_true", help="List the slow tests")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")
    parser.add_argument("--cov", action="store_true", help="Report coverage (needs pytest-cov)")

    args = parser.parse_args()

    if args.slow:
        show_slow_tests()
        return 0

    return run_tests(include_slow=args.all, coverage=args.cov)


if __name__ == "__main__":
    sys.exit(main())
