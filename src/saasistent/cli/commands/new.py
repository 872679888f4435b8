"""
saasistent new - Configure a project step by step and generate its outputs.

Usage:
    saasistent new
    saasistent new --output ./out
"""

import asyncio
from pathlib import Path
from typing import Annotated, Any

import questionary
import typer
from questionary import Style
from rich.live import Live
from rich.progress import Progress, SpinnerColumn, TextColumn

from saasistent.cli.common import build_orchestrator, require_user
from saasistent.cli.output import (
    artifact_status_table,
    config_summary_table,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from saasistent.config import get_config
from saasistent.generation import ArtifactKey, GenerationOrchestrator, expand_idea
from saasistent.providers import ProviderError, get_provider_manager
from saasistent.storage import ProjectRecord, ProjectStore
from saasistent.wizard import AdvanceResult, ProjectWizard, WizardStep
from saasistent.wizard.options import CATALOGS, AIProvider

app = typer.Typer(
    name="new",
    help="Create a project with the interactive wizard.",
    invoke_without_command=True,
)

custom_style = Style(
    [
        ("qmark", "fg:#5f87ff bold"),
        ("question", "bold"),
        ("answer", "fg:#00d787 bold"),
        ("pointer", "fg:#5f87ff bold"),
        ("highlighted", "fg:#5f87ff bold"),
        ("selected", "fg:#00d787"),
        ("instruction", "fg:#6c6c6c"),
    ]
)

_NEXT = "next"
_BACK = "back"
_CANCEL = "cancel"


class WizardCancelled(Exception):
    """The user aborted the wizard."""

    pass


def _answered(value: Any) -> Any:
    # questionary returns None on Ctrl+C
    if value is None:
        raise WizardCancelled()
    return value


def _header(wizard: ProjectWizard) -> None:
    step = wizard.current_step
    filled = round(wizard.progress * 20)
    bar = "█" * filled + "░" * (20 - filled)
    console.print()
    console.print(
        f"[bold cyan]Step {step.ordinal} of {wizard.total_steps}[/bold cyan]  "
        f"[dim]{bar}[/dim]  [bold]{step.title}[/bold] [dim]- {step.description}[/dim]"
    )


async def _select_option(field_name: str, current: Any, message: str) -> Any:
    choices = [
        questionary.Choice(
            title=option.name,
            value=option.value,
            description=option.description,
        )
        for option in CATALOGS[field_name]
    ]
    return _answered(
        await questionary.select(
            message,
            choices=choices,
            default=next((c for c in choices if c.value == current), None),
            style=custom_style,
            use_indicator=True,
        ).ask_async()
    )


# -----------------------------------------------------------------------------
# Step handlers
# -----------------------------------------------------------------------------


async def _idea_step(wizard: ProjectWizard) -> None:
    config = wizard.config
    name = _answered(
        await questionary.text("Project name:", default=config.name, style=custom_style).ask_async()
    )
    description = _answered(
        await questionary.text(
            "What does it do?",
            default=config.description,
            multiline=False,
            style=custom_style,
        ).ask_async()
    )
    wizard.update(name=name, description=description)

    if not description.strip():
        return

    expand = _answered(
        await questionary.confirm(
            "Expand the idea with AI?",
            default=config.expanded_description is None,
            style=custom_style,
        ).ask_async()
    )
    if not expand:
        return

    manager = get_provider_manager()
    budget = get_config().generation.max_tokens.expand_idea
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Expanding idea...", total=None)
        try:
            expanded = await expand_idea(description, manager.complete_text, budget)
        except ProviderError as e:
            print_error(f"Could not expand the idea: {e}")
            return

    console.print()
    console.print(expanded, markup=False)
    keep = _answered(
        await questionary.confirm("Keep this expanded description?", default=True, style=custom_style).ask_async()
    )
    if keep:
        wizard.update(expanded_description=expanded)


async def _choice_step(wizard: ProjectWizard) -> None:
    step = wizard.current_step
    for field_name in step.fields:
        label = field_name.replace("_", " ").capitalize()
        value = await _select_option(field_name, getattr(wizard.config, field_name), f"{label}:")
        wizard.update({field_name: value})


async def _ai_step(wizard: ProjectWizard) -> None:
    provider = await _select_option("ai_provider", wizard.config.ai_provider, "AI provider:")
    wizard.update(ai_provider=provider)
    if provider == AIProvider.NONE:
        return

    selected = set(wizard.config.ai_features)
    chosen = _answered(
        await questionary.checkbox(
            "AI features:",
            choices=[
                questionary.Choice(
                    title=option.name,
                    value=option.value,
                    checked=option.value in selected,
                    description=option.description,
                )
                for option in CATALOGS["ai_features"]
            ],
            style=custom_style,
        ).ask_async()
    )
    for feature in selected.symmetric_difference(chosen):
        wizard.toggle_ai_feature(feature)


async def _review_step(wizard: ProjectWizard) -> None:
    console.print(config_summary_table(wizard.config))


_STEP_HANDLERS = {
    "idea": _idea_step,
    "ai": _ai_step,
    "review": _review_step,
}


def _handler_for(step: WizardStep):
    return _STEP_HANDLERS.get(step.key, _choice_step)


async def _navigate(wizard: ProjectWizard) -> str:
    next_title = "Generate outputs" if wizard.is_final_step else "Next"
    choices = [questionary.Choice(title=next_title, value=_NEXT)]
    if not wizard.is_first_step:
        choices.append(questionary.Choice(title="Back", value=_BACK))
    choices.append(questionary.Choice(title="Cancel", value=_CANCEL))

    return _answered(
        await questionary.select("Continue?", choices=choices, style=custom_style).ask_async()
    )


async def run_project_wizard(wizard: ProjectWizard) -> bool:
    """
    Walk through every step until the user asks to generate.

    Returns:
        True when the user confirmed on the review step, False if cancelled.
    """
    try:
        while True:
            _header(wizard)
            await _handler_for(wizard.current_step)(wizard)

            action = await _navigate(wizard)
            if action == _CANCEL:
                return False
            if action == _BACK:
                wizard.retreat()
                continue

            result = wizard.advance()
            if result == AdvanceResult.AT_END:
                return True
            if result == AdvanceResult.BLOCKED:
                for message in wizard.unmet_requirements():
                    print_warning(message)
    except WizardCancelled:
        return False


# -----------------------------------------------------------------------------
# Generation
# -----------------------------------------------------------------------------


async def _generate(orchestrator: GenerationOrchestrator, wizard: ProjectWizard) -> None:
    with Live(artifact_status_table(orchestrator.artifacts), console=console, refresh_per_second=8) as live:

        def refresh(slot) -> None:
            live.update(artifact_status_table(orchestrator.artifacts))

        orchestrator.add_listener(refresh)
        try:
            handle = orchestrator.generate(wizard.snapshot())
            live.update(artifact_status_table(orchestrator.artifacts))
            await handle.wait()
        finally:
            orchestrator.remove_listener(refresh)


def _report_failures(orchestrator: GenerationOrchestrator) -> None:
    for slot in orchestrator.artifacts:
        if not slot.is_failed:
            continue
        print_error(f"{slot.key.label}: {slot.error.cause if slot.error else 'failed'}")


async def _deliver(orchestrator: GenerationOrchestrator, wizard: ProjectWizard) -> dict[str, str]:
    """
    Offer copy/download for every ready artifact and a rerun when any failed.

    Returns:
        Saved file paths by artifact key.
    """
    saved: dict[str, str] = {}

    while True:
        ready = [slot.key for slot in orchestrator.artifacts if slot.is_ready]
        any_failed = any(slot.is_failed for slot in orchestrator.artifacts)
        if not ready and not any_failed:
            return saved

        choices = []
        for key in ready:
            choices.append(questionary.Choice(title=f"Copy {key.label}", value=("copy", key)))
            choices.append(questionary.Choice(title=f"Download {key.label}", value=("download", key)))
        if any_failed:
            choices.append(questionary.Choice(title="Regenerate all", value=("regenerate", None)))
        choices.append(questionary.Choice(title="Done", value=("done", None)))

        answer = await questionary.select("What next?", choices=choices, style=custom_style).ask_async()
        if answer is None or answer[0] == "done":
            return saved

        action, key = answer
        if action == "regenerate":
            # Downloads of the replaced cycle
            saved.clear()
            await _generate(orchestrator, wizard)
            _report_failures(orchestrator)
            continue

        if action == "copy":
            result = orchestrator.copy(key)
        else:
            result = orchestrator.download(key)
            if result.ok and result.path:
                saved[ArtifactKey(key).value] = str(result.path)

        if result.ok:
            print_success(result.message)
        else:
            print_error(result.message)


async def _run_new(output_dir: Path | None) -> None:
    store = ProjectStore()
    wizard = ProjectWizard()

    if not await run_project_wizard(wizard):
        console.print("[yellow]Wizard cancelled.[/yellow]")
        return

    record = store.save(ProjectRecord.from_config(wizard.snapshot()))
    print_info(f"Saved project [bold]{record.name}[/bold] ({record.id})")

    orchestrator = build_orchestrator(output_dir)
    try:
        await _generate(orchestrator, wizard)
        _report_failures(orchestrator)
        saved = await _deliver(orchestrator, wizard)
    except asyncio.CancelledError:
        orchestrator.detach()
        raise

    if saved:
        store.mark_generated(record.id, saved)


@app.callback(invoke_without_command=True)
def new_project(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory for downloaded outputs.",
        ),
    ] = None,
) -> None:
    """
    Configure a new project in eight steps and generate its init prompt,
    MVP scope and MAX scope.
    """
    if ctx.invoked_subcommand is not None:
        return

    require_user("/dashboard/new")

    try:
        asyncio.run(_run_new(output))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130)
