"""Tests for the command registry."""

import pytest

from paramobject.commands.base import BaseCommand
from paramobject.commands.registry import (
    apply_refactoring,
    discover_and_register_commands,
    get_command,
    register_command,
    registered_commands,
)
from paramobject.commands.simplifying_method_calls.introduce_parameter_object import (
    IntroduceParameterObjectCommand,
)


class TestRegistry:
    """Tests for registering and looking up commands."""

    def test_discovery_registers_introduce_parameter_object(self) -> None:
        discover_and_register_commands()

        assert "introduce-parameter-object" in registered_commands()
        assert get_command("introduce-parameter-object") is IntroduceParameterObjectCommand

    def test_unknown_command(self) -> None:
        with pytest.raises(ValueError, match="Unknown refactoring: extract-method"):
            get_command("extract-method")

    def test_command_without_name(self) -> None:
        class Nameless(BaseCommand):
            def execute(self) -> str:
                return ""

            def validate(self) -> None:
                pass

        with pytest.raises(ValueError, match="must have a 'name' attribute"):
            register_command(Nameless)

    def test_apply_refactoring_validates_first(self, tmp_path) -> None:
        """Missing parameters are reported before the descriptor is read."""
        discover_and_register_commands()

        with pytest.raises(ValueError, match="Missing required parameters"):
            apply_refactoring("introduce-parameter-object", tmp_path / "missing.json")

    def test_apply_refactoring_returns_source(self, tmp_path) -> None:
        discover_and_register_commands()
        descriptor = tmp_path / "descriptor.json"
        descriptor.write_text('{"parameters": [{"name": "x", "type": "int"}]}')

        source = apply_refactoring("introduce-parameter-object", descriptor, name="Point")

        assert source.startswith("public class Point{\n")

    def test_discovery_returns_registered_names(self) -> None:
        """Discovery skips the base and registry modules and reports what it registered."""
        names = discover_and_register_commands()

        assert names == registered_commands()
        assert "introduce-parameter-object" in names

    def test_unknown_command_lists_available(self) -> None:
        discover_and_register_commands()

        with pytest.raises(ValueError, match="available: .*introduce-parameter-object"):
            get_command("extract-method")
