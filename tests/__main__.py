#!/usr/bin/env python3
"""
Test runner for chat-policy-sdk.

This module allows running the test suite using:
    python -m tests

Arguments are passed straight to pytest; without any, the whole suite runs.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main(argv=None):
    """Run the test suite using pytest."""
    try:
        import pytest
    except ImportError:
        print("Error: pytest is not installed.")
        print("Please install it with: pip install -e .[dev]")
        return 1

    argv = sys.argv[1:] if argv is None else argv

    # Default pytest arguments
    args = [str(Path(__file__).parent), "-v", "--tb=short"]
    if argv:
        args = list(argv)

    exit_code = int(pytest.main(args))

    if exit_code == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Tests failed with exit code: {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
