"""CLI entry point for paramobject."""

import logging
from pathlib import Path
from typing import Any, Optional

import click

from paramobject import __version__
from paramobject.commands.registry import apply_refactoring, discover_and_register_commands

# Dynamically discover and import all command modules
discover_and_register_commands()


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """paramobject - parameter object class generator.

    Backend of the Introduce Parameter Object refactoring: turns a descriptor
    of extracted parameters into the source of the new class.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def generate_file(refactoring_name: str, descriptor_path: Path, **params: Any) -> str:
    """Apply a refactoring to a descriptor file.

    Args:
        refactoring_name: Name of the refactoring to apply
        descriptor_path: Path to the descriptor file
        **params: Additional parameters for the refactoring

    Returns:
        The generated source text

    Raises:
        ValueError: If refactoring_name is not recognized or the refactoring fails
    """
    return apply_refactoring(refactoring_name, descriptor_path, **params)


@main.command("introduce-parameter-object")
@click.argument("descriptor", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", "class_name", required=True, help="Name of the new parameter object class.")
@click.option("--package", default=None, help="Package of the new class (overrides the descriptor).")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write <package path>/<name>.java under this directory instead of printing.",
)
def introduce_parameter_object(
    descriptor: Path, class_name: str, package: Optional[str], output_dir: Optional[Path]
) -> None:
    """Generate a parameter object class from DESCRIPTOR."""
    try:
        source = generate_file(
            "introduce-parameter-object",
            descriptor,
            name=class_name,
            package=package,
            output_dir=output_dir,
        )
    except ValueError as e:
        raise click.ClickException(f"refactoring aborted, no changes applied: {e}") from e

    if output_dir is None:
        click.echo(source, nl=False)
    else:
        click.echo(f"Generated {class_name} in {output_dir}")
