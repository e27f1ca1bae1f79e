#!/usr/bin/env python3
"""
jsir Fixture Test Runner

Runs golden-output fixtures for the jsir node catalog.

Each fixture is a Python file ``tNN_<name>.py`` defining ``build()``, which
returns a Module. The runner serializes that Module and compares the text
byte-for-byte with ``tNN_<name>.expected.txt`` next to it. A single trailing
newline at the end of the expected file is ignored.

Usage:
    python run_fixtures.py [options]

Examples:
    python run_fixtures.py
    python run_fixtures.py --verbose --fail-fast
    python run_fixtures.py --fixtures-dir ./custom_fixtures
"""

from __future__ import annotations

import argparse
import importlib.util
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureResult:
    """Represents the result of a single fixture."""
    name: str
    passed: bool
    expected_output: str = ""
    actual_output: str = ""
    error_message: str = ""

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}"


@dataclass
class FixtureSuite:
    """Manages a collection of fixture results."""
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        """Return the number of passed fixtures."""
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        """Return the number of failed fixtures."""
        return sum(1 for r in self.results if not r.passed)

    def add_result(self, result: FixtureResult) -> None:
        """Add a fixture result to the suite."""
        self.results.append(result)

    def print_summary(self) -> None:
        """Print a summary of all fixture results."""
        print("\n" + "=" * 50)
        print(f"Fixture Summary: {self.passed_count} passed, {self.failed_count} failed")
        print("=" * 50)

        if self.failed_count > 0:
            print("\nFailed fixtures:")
            for result in self.results:
                if not result.passed:
                    print(f"  - {result.name}: {result.error_message}")


class FixtureRunner:
    """
    Main runner class for jsir golden fixtures.

    This class handles the discovery, building and comparison of fixtures.
    """

    def __init__(
        self,
        fixtures_dir: Path,
        verbose: bool = False,
        fail_fast: bool = False
    ) -> None:
        """
        Initialize the fixture runner.

        Args:
            fixtures_dir: Directory containing fixtures
            verbose: Print expected/actual text on mismatch
            fail_fast: Stop on first failure
        """
        self.fixtures_dir = fixtures_dir.resolve()
        self.verbose = verbose
        self.fail_fast = fail_fast
        self.suite = FixtureSuite()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    def discover_fixtures(self) -> Iterator[Path]:
        """
        Discover all fixture builder files in the fixtures directory.

        Yields:
            Path objects to fixture Python files
        """
        if not self.fixtures_dir.exists():
            raise FileNotFoundError(f"Fixtures directory not found: {self.fixtures_dir}")

        fixture_files = sorted(self.fixtures_dir.glob("t*.py"))
        if not fixture_files:
            raise ValueError(f"No fixtures found in {self.fixtures_dir}")

        logger.debug(f"Discovered {len(fixture_files)} fixture files")
        yield from fixture_files

    def load_expected_output(self, expected_file: Path) -> str:
        """
        Load expected output, dropping one trailing newline.

        Args:
            expected_file: Path to the expected output file

        Returns:
            Expected output as string
        """
        text = expected_file.read_text(encoding="utf-8")
        if text.endswith("\n"):
            text = text[:-1]
        return text

    def build_fixture(self, fixture_file: Path) -> str:
        """
        Import a fixture file and serialize the Module its build() returns.

        Args:
            fixture_file: Path to the fixture Python file

        Returns:
            The serialized module text
        """
        spec = importlib.util.spec_from_file_location(f"jsir_fixture_{fixture_file.stem}", fixture_file)
        fixture = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = fixture
        try:
            spec.loader.exec_module(fixture)
        finally:
            del sys.modules[spec.name]
        return fixture.build().serialize()

    def run_single_fixture(self, fixture_file: Path) -> FixtureResult:
        """
        Run a single fixture.

        Args:
            fixture_file: Path to the fixture Python file

        Returns:
            FixtureResult containing the outcome
        """
        name = fixture_file.stem
        expected_file = self.fixtures_dir / f"{name}.expected.txt"

        logger.debug(f"Fixture file: {fixture_file}")
        logger.debug(f"Expected file: {expected_file}")

        if not expected_file.exists():
            return FixtureResult(
                name=name,
                passed=False,
                error_message=f"Missing expected file: {expected_file}"
            )

        expected_output = self.load_expected_output(expected_file)

        try:
            actual_output = self.build_fixture(fixture_file)
        except Exception as e:
            logger.error(f"Building {name} failed: {e}")
            return FixtureResult(
                name=name,
                passed=False,
                expected_output=expected_output,
                error_message=f"{type(e).__name__}: {e}"
            )

        if actual_output == expected_output:
            return FixtureResult(
                name=name,
                passed=True,
                expected_output=expected_output,
                actual_output=actual_output
            )

        if self.verbose:
            print("---- expected ----")
            print(expected_output)
            print("---- actual ----")
            print(actual_output)
        return FixtureResult(
            name=name,
            passed=False,
            expected_output=expected_output,
            actual_output=actual_output,
            error_message="Output mismatch"
        )

    def run_all(self) -> int:
        """
        Run all discovered fixtures.

        Returns:
            Exit code (0 for success, 1 for failure)
        """
        try:
            fixture_files = list(self.discover_fixtures())
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Fixture discovery failed: {e}")
            return 1

        for fixture_file in fixture_files:
            result = self.run_single_fixture(fixture_file)
            self.suite.add_result(result)
            print(result)

            if not result.passed and self.fail_fast:
                logger.info("Fail-fast enabled, stopping after first failure")
                break

        self.suite.print_summary()

        return 0 if self.suite.failed_count == 0 else 1


def parse_arguments(argv: list = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="run_fixtures.py",
        description="Run jsir golden-output fixtures",
    )

    parser.add_argument(
        "--fixtures-dir",
        type=Path,
        default=None,
        help="Directory containing fixtures (default: ../tests/fixtures)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--fail-fast", "-x",
        action="store_true",
        help="Stop on first failure"
    )

    return parser.parse_args(argv)


def main(argv: list = None) -> int:
    """
    Main entry point for the fixture runner.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )

    args = parse_arguments(argv)

    if args.fixtures_dir:
        fixtures_dir = args.fixtures_dir
    else:
        fixtures_dir = Path(__file__).parent.resolve().parent / "tests" / "fixtures"

    runner = FixtureRunner(
        fixtures_dir=fixtures_dir,
        verbose=args.verbose,
        fail_fast=args.fail_fast
    )

    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
