from rich.console import Console
from rich.markup import escape

from stowage.core.models import CommandResult

console_out = Console(soft_wrap=True, highlight=False, emoji=False)
console_err = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def info(message: str) -> None:
    console_err.print(f"[blue]ℹ[/blue] {escape(message)}")


def success(message: str) -> None:
    console_err.print(f"[bold green]✔[/bold green] {escape(message)}")


def error(message: str, hint: str | None = None) -> None:
    console_err.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if hint:
        console_err.print(escape(hint))


class ResultPresenter:
    def __init__(self, result: CommandResult):
        self.result = result

    def print_json(self):
        console_out.print_json(data=self.result.data, default=str)

    def print_text(self):
        if self.result.renderer is None:
            return

        for line in self.result.renderer(self.result.data, self.result.context):
            console_out.print(line)

    def render(self, json_output: bool):
        if self.result.message:
            success(self.result.message)

        if json_output:
            if self.result.data is not None:
                self.print_json()
            return

        self.print_text()
        if self.result.summary:
            success(self.result.summary)
