#!/usr/bin/env python3

"""
Test runner for the Elasticsearch MCP server.

Usage:
    python run_tests.py [test_type] [pytest options]
    
Test types:
    unit        - Run unit tests only
    integration - Run in-memory MCP client tests only
    e2e         - Run tests that spawn the server over stdio
    all         - Run all tests (default)
    
Examples:
    python run_tests.py unit
    python run_tests.py integration -v
    python run_tests.py all --no-cov
"""

import subprocess
import sys
from pathlib import Path

TEST_TYPES = ("unit", "integration", "e2e", "all")


def run_tests(test_type="all", extra_args=None):
    """Run one test suite and return the pytest exit code."""
    extra_args = list(extra_args or [])
    tests_dir = Path(__file__).parent / "tests"
    
    cmd = [sys.executable, "-m", "pytest"]
    
    if "--no-cov" in extra_args:
        extra_args.remove("--no-cov")
    else:
        cmd.extend([
            "--cov=config", "--cov=utils", "--cov=tools", "--cov=mcp_types", "--cov=server",
            "--cov-report=term-missing",
        ])
    
    cmd.append(str(tests_dir if test_type == "all" else tests_dir / test_type))
    cmd.extend(extra_args)
    
    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


def main():
    """Main test runner function."""
    args = sys.argv[1:]
    test_type = "all"
    
    if args and args[0] in TEST_TYPES:
        test_type = args.pop(0)
    elif args and not args[0].startswith("-"):
        print(f"❌ Unknown test type: {args[0]} (expected one of {', '.join(TEST_TYPES)})")
        return 2
    
    returncode = run_tests(test_type, args)
    if returncode == 0:
        print(f"✅ {test_type} tests passed")
    else:
        print(f"❌ {test_type} tests failed")
    return returncode


if __name__ == "__main__":
    sys.exit(main())
