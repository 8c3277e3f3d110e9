#!/usr/bin/env python3

"""
Test runner for the Elasticsearch client.

Usage:
    python run_tests.py [test_type] [options]

Test types:
    unit        - Run unit tests only
    integration - Run MCP tool integration tests only
    manual      - Run end-to-end tests (requires real Elasticsearch)
    all         - Run unit and integration tests (default)

Examples:
    python run_tests.py unit
    python run_tests.py integration -v
    python run_tests.py all --no-cov
    python run_tests.py manual  # Requires ELASTIC_URL env var
"""

import os
import subprocess
import sys
from pathlib import Path

TEST_TYPES = ["unit", "integration", "manual", "all"]


def run_command(cmd, description):
    """Run a command, streaming its output."""
    print(f"\n{description}")
    print(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd)

    if result.returncode != 0:
        print(f"{description} failed (exit code {result.returncode})")
        return False

    print(f"{description} completed successfully")
    return True


def build_command(test_type, extra_args):
    """Build the pytest command line for a test type."""
    cmd = [sys.executable, "-m", "pytest"]

    # Add coverage by default (unless --no-cov specified)
    if "--no-cov" in extra_args:
        extra_args = [arg for arg in extra_args if arg != "--no-cov"]
    else:
        cmd.extend(["--cov=esclient", "--cov-report=term-missing"])

    tests_dir = Path(__file__).parent / "tests"

    if test_type == "unit":
        cmd.append(str(tests_dir / "unit"))
    elif test_type == "integration":
        cmd.append(str(tests_dir / "integration"))
    elif test_type == "manual":
        cmd.append(str(tests_dir / "e2e"))
        cmd.extend(["-m", "manual"])
    else:
        cmd.append(str(tests_dir))
        cmd.extend(["-m", "not manual"])

    cmd.extend(extra_args)
    return cmd


def main():
    """Main test runner function."""
    args = sys.argv[1:]
    test_type = "all"
    extra_args = []

    if args and args[0] in TEST_TYPES:
        test_type = args[0]
        extra_args = args[1:]
    else:
        extra_args = args

    print("esclient Test Runner")
    print(f"Test Type: {test_type}")

    if test_type == "manual" and not os.getenv("ELASTIC_URL"):
        print("Manual tests require the ELASTIC_URL environment variable")
        return 1

    if not run_command(build_command(test_type, extra_args), f"Running {test_type} tests"):
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
