#!/usr/bin/env python
"""Test runner for Chat Policy SDK."""

import sys
import subprocess
import argparse


def main():
    """Run tests with various options."""
    parser = argparse.ArgumentParser(description="Run Chat Policy SDK tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run HTTP/CLI integration tests only")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching this expression")

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest", "tests", "--tb=short"]

    if args.unit and not args.integration:
        cmd.extend(["-m", "unit"])
    elif args.integration and not args.unit:
        cmd.extend(["-m", "integration"])

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    if args.verbose:
        cmd.append("-vv")

    if args.coverage:
        cmd.extend([
            "--cov=chat_policy_sdk",
            "--cov-report=term-missing",
        ])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=".")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
