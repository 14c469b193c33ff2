#!/usr/bin/env python3
"""
API Test Runner
===============

Runs the endpoint suites (or the offline unit tests) with pytest.

Usage:
    chapter-api-tests [--group GROUP | --endpoint NAME | --unit-only]
                      [--base-url URL] [--token TOKEN] [--require-live]
                      [--verbose] [--maxfail N] [--project-root DIR]
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from chapter_api.client.endpoints import ENDPOINTS, GROUPS

TESTS_ROOT = Path("tests")

# Checkout holding this package; valid for source checkouts and editable installs
PACKAGE_ROOT = Path(__file__).resolve().parents[1]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="API integration test runner")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--group", choices=GROUPS, help="Run one resource group")
    selection.add_argument(
        "--endpoint", choices=sorted(ENDPOINTS), help="Run the suite for one endpoint"
    )
    selection.add_argument("--unit-only", action="store_true", help="Run offline unit tests only")
    parser.add_argument("--base-url", help="Override API_BASE_URL")
    parser.add_argument("--token", help="Override API_AUTH_TOKEN")
    parser.add_argument(
        "--require-live",
        action="store_true",
        help="Fail instead of skipping when the API is unreachable",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--maxfail", type=int, help="Stop after N failures")
    parser.add_argument("--project-root", help="Directory holding tests/ (default: auto-detect)")
    return parser


def find_project_root(explicit: Optional[str] = None, cwd: Optional[Path] = None) -> Path:
    """Directory pytest runs in: the one holding ``tests/``.

    An explicit ``--project-root`` wins, then the checkout this package lives
    in, then the current directory.
    """
    if explicit:
        return Path(explicit).resolve()
    if (PACKAGE_ROOT / TESTS_ROOT).is_dir():
        return PACKAGE_ROOT
    return (cwd or Path.cwd()).resolve()


def endpoint_suite_path(name: str) -> Path:
    """Suite module for a catalog endpoint."""
    endpoint = ENDPOINTS[name]
    return TESTS_ROOT / "api" / endpoint.group / f"test_{name}.py"


def build_pytest_command(args: argparse.Namespace) -> List[str]:
    """Build the pytest command line for the parsed arguments."""
    cmd = [sys.executable, "-m", "pytest"]

    if args.verbose:
        cmd.extend(["-v", "-rs"])

    if args.unit_only:
        cmd.append(str(TESTS_ROOT / "unit"))
    elif args.group:
        cmd.append(str(TESTS_ROOT / "api" / args.group))
    elif args.endpoint:
        cmd.append(str(endpoint_suite_path(args.endpoint)))
    else:
        cmd.append(str(TESTS_ROOT))

    cmd.append("--tb=short")
    if args.maxfail:
        cmd.append(f"--maxfail={args.maxfail}")

    return cmd


def build_environment(
    args: argparse.Namespace, base_env: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """Environment for the pytest subprocess with CLI overrides applied."""
    env = dict(os.environ if base_env is None else base_env)
    if args.base_url:
        env["API_BASE_URL"] = args.base_url
    if args.token is not None:
        env["API_AUTH_TOKEN"] = args.token
    if args.require_live:
        env["API_REQUIRE_LIVE"] = "true"
    return env


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main test runner."""
    args = build_parser().parse_args(argv)

    cmd = build_pytest_command(args)
    env = build_environment(args)
    root = find_project_root(args.project_root)

    print("=" * 60)
    print("API Test Execution")
    print("=" * 60)
    print(f"Command: {' '.join(cmd)}")
    print(f"Project root: {root}")
    print(f"Base URL: {env.get('API_BASE_URL', '(default)')}")
    print(f"Authenticated: {bool(env.get('API_AUTH_TOKEN'))}")
    print("=" * 60)

    result = subprocess.run(cmd, env=env, cwd=root)

    if result.returncode == 0:
        print("\n✅ API tests completed successfully!")
    else:
        print(f"\n❌ API tests failed with return code: {result.returncode}")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
