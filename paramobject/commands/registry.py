"""Command registry for dynamic dispatch of refactorings."""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from paramobject.commands.base import BaseCommand

logger = logging.getLogger(__name__)

INFRASTRUCTURE_MODULES = frozenset({"paramobject.commands.base", "paramobject.commands.registry"})

_registry: Dict[str, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Register a command class.

    Args:
        command_class: The command class to register

    Raises:
        ValueError: If command_class doesn't have a name attribute
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    _registry[command_class.name] = command_class


def get_command(name: str) -> Type[BaseCommand]:
    """Get a command class by name.

    Args:
        name: The name of the command

    Returns:
        The command class

    Raises:
        ValueError: If command is not registered
    """
    if name not in _registry:
        available = ", ".join(registered_commands()) or "none"
        raise ValueError(f"Unknown refactoring: {name} (available: {available})")
    return _registry[name]


def registered_commands() -> list[str]:
    """Return the names of all registered commands, sorted."""
    return sorted(_registry)


def discover_and_register_commands() -> list[str]:
    """Import every command module in the category packages below paramobject.commands.

    Command modules register themselves at import time. Modules that are
    already imported are skipped by the import system, so repeated calls are cheap.

    Returns:
        Names of all registered commands after discovery, sorted
    """
    import paramobject.commands as commands_package

    for module_info in pkgutil.walk_packages(
        commands_package.__path__, prefix=f"{commands_package.__name__}."
    ):
        leaf = module_info.name.rsplit(".", 1)[-1]
        if module_info.ispkg or leaf.startswith("_") or module_info.name in INFRASTRUCTURE_MODULES:
            continue
        importlib.import_module(module_info.name)
        logger.debug("Imported command module %s", module_info.name)
    return registered_commands()


def apply_refactoring(refactoring: str, file_path: Path, **params: Any) -> str:
    """Apply a refactoring using the registry.

    Args:
        refactoring: Name of the refactoring to apply
        file_path: Path to the descriptor file
        **params: Additional parameters for the refactoring

    Returns:
        The generated source text

    Raises:
        ValueError: If refactoring is unknown or parameters are invalid
    """
    command_class = get_command(refactoring)
    command = command_class(file_path, **params)
    command.validate()
    return command.execute()
