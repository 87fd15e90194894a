"""Pytest configuration and shared fixtures for paramobject tests."""

import difflib
import shutil
from pathlib import Path
from typing import Any, Iterator, Optional

import pytest


class GeneratorTestBase:
    """Base class for generator tests with automatic fixture management.

    Usage:
        class TestIntroduceParameterObject(GeneratorTestBase):
            fixture_category = "simplifying_method_calls/introduce_parameter_object"

            def test_simple(self):
                self.generate("introduce-parameter-object", name="Point")

    Convention:
        - Test method name (minus 'test_' prefix) maps to fixture directory name
        - Fixture directory contains descriptor.json and expected.java
        - Example: test_simple() -> fixtures/simplifying_method_calls/introduce_parameter_object/simple/
    """

    fixture_category: Optional[str] = None  # Must be set in subclass

    @pytest.fixture(autouse=True)
    def _setup_fixture(self, tmp_path: Path, request: pytest.FixtureRequest) -> Iterator[None]:
        """Copy the fixture descriptor into a temporary directory before each test.

        Creates:
            self.tmp_path: Temporary directory for this test
            self.descriptor_file: Path to descriptor.json (copied to tmp_path)
            self.expected_file: Path to expected.java (in fixtures)
        """
        self.tmp_path = tmp_path
        self.descriptor_file: Optional[Path] = None
        self.expected_file: Optional[Path] = None

        test_name = request.function.__name__
        fixture_name = test_name[5:] if test_name.startswith("test_") else test_name

        if self.fixture_category is None:
            raise ValueError(f"{self.__class__.__name__} must set fixture_category class attribute")

        fixture_dir = Path(__file__).parent / "fixtures" / self.fixture_category / fixture_name

        # Allow tests without fixtures (for unit tests, etc.)
        if fixture_dir.exists():
            descriptor_file = fixture_dir / "descriptor.json"
            expected_file = fixture_dir / "expected.java"
            if not (descriptor_file.exists() and expected_file.exists()):
                raise FileNotFoundError(
                    f"Fixture directory {fixture_dir} must contain descriptor.json and expected.java"
                )
            self.descriptor_file = tmp_path / "descriptor.json"
            self.expected_file = expected_file
            shutil.copy(descriptor_file, self.descriptor_file)

        yield

    def generate(self, refactoring_name: str, **params: Any) -> str:
        """Run the refactoring and assert the generated text matches expected.java exactly.

        Args:
            refactoring_name: Name of refactoring (e.g., "introduce-parameter-object")
            **params: Parameters to pass to the refactoring

        Returns:
            The generated source text
        """
        # Import here to avoid circular dependencies during test collection
        from paramobject.cli import generate_file

        if self.descriptor_file is None or self.expected_file is None:
            raise RuntimeError("No fixture loaded. Ensure fixture directory exists for this test.")

        actual = generate_file(refactoring_name, self.descriptor_file, **params)
        self.assert_matches_expected(actual)
        return actual

    def assert_matches_expected(self, actual: str) -> None:
        """Assert that generated text matches expected.java byte for byte."""
        assert self.expected_file is not None
        expected = self.expected_file.read_text(encoding="utf-8")
        assert actual == expected, self._format_diff(actual, expected)

    def _format_diff(self, actual: str, expected: str) -> str:
        """Format a readable diff between actual and expected."""
        diff = difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile="expected.java",
            tofile="actual.java",
            lineterm="",
        )
        return "".join(diff)
