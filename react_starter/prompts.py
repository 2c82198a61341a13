"""Interactive collection of the project name and template choice."""

from __future__ import annotations

from pydantic import BaseModel
from rich.console import Console
from rich.prompt import Prompt

from react_starter.utils import console as default_console
from react_starter.utils import is_valid_project_name


class ProjectRequest(BaseModel):
    """What the user asked to generate."""

    project_name: str
    template: str


def ask_project_name(console: Console | None = None) -> str:
    """Ask for a project name until the answer is lowercase alphanumeric with hyphens."""
    console = console or default_console
    while True:
        answer = Prompt.ask("Project Name", console=console).strip()
        if is_valid_project_name(answer):
            return answer
        console.print(
            "[red]Project name must be lowercase, alphanumeric with hyphens[/red]"
        )


def ask_template(choices: list[str], console: Console | None = None) -> str:
    """Ask which template to generate; the first choice is the default."""
    return Prompt.ask(
        "Select Project Template",
        choices=choices,
        default=choices[0],
        console=console or default_console,
    )


def collect_project_details(
    choices: list[str], console: Console | None = None
) -> ProjectRequest:
    """Prompt for everything a generation run needs."""
    name = ask_project_name(console)
    template = ask_template(choices, console)
    return ProjectRequest(project_name=name, template=template)
