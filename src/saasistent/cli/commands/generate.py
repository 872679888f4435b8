"""
saasistent generate - Generate outputs from a saved configuration file.

Usage:
    saasistent generate project.yaml
    saasistent generate project.json --output ./out
"""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from saasistent.cli.common import build_orchestrator
from saasistent.cli.output import artifact_status_table, console, print_error, print_success
from saasistent.generation import GenerationOrchestrator, InvalidInputError
from saasistent.wizard import ProjectConfig


def load_project_file(path: Path) -> ProjectConfig:
    """
    Read a project configuration from YAML or JSON.

    Keys may be snake_case or camelCase.

    Raises:
        ValueError: If the file is not a mapping or holds invalid values.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of settings")

    return ProjectConfig().merged(data)


async def _generate(orchestrator: GenerationOrchestrator, config: ProjectConfig) -> None:
    with console.status("Generating outputs..."):
        handle = orchestrator.generate(config)
        await handle.wait()


def generate(
    config_file: Annotated[
        Path,
        typer.Argument(
            help="Project configuration (.yaml, .yml or .json).",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory to write the markdown files to.",
        ),
    ] = None,
) -> None:
    """
    Generate all three outputs concurrently and save each one that succeeds.

    Exits with code 1 if any output failed.
    """
    try:
        config = load_project_file(config_file)
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        print_error(f"Invalid project file: {e}")
        raise typer.Exit(1)

    orchestrator = build_orchestrator(output)
    try:
        asyncio.run(_generate(orchestrator, config))
    except InvalidInputError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print(artifact_status_table(orchestrator.artifacts))

    failed = False
    for slot in orchestrator.artifacts:
        if slot.is_ready:
            result = orchestrator.download(slot.key)
            if result.ok:
                print_success(result.message)
            else:
                print_error(result.message)
                failed = True
        else:
            failed = True

    if failed:
        raise typer.Exit(1)
