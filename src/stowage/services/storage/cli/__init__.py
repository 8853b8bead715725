import typer

from stowage.core.config import DEFAULT_STORAGE_URL, KEY_ENV_VAR, URL_ENV_VAR


def url_option():
    return typer.Option(
        None,
        "--url",
        help=f"Storage URL (env: {URL_ENV_VAR}, default: {DEFAULT_STORAGE_URL})",
        show_default=False,
    )


def key_option():
    return typer.Option(
        None, "--key", help=f"Service role key (env: {KEY_ENV_VAR})", show_default=False
    )


def json_option():
    return typer.Option(False, "--json", help="Output as JSON")


def verbose_option():
    return typer.Option(False, "--verbose", "-v", help="Log storage requests to stderr")


def action_argument(choices: list[str]):
    return typer.Argument(
        None,
        help=f"Action to perform: {', '.join(choices)}",
        show_default=False,
    )
