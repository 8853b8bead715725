import logging
import sys
from collections.abc import Callable
from typing import Any

from stowage.core import presenter
from stowage.core.config import resolve_config
from stowage.core.models import CommandGroup, CommandResult, StowageError
from stowage.core.presenter import ResultPresenter
from stowage.services.storage.client import get_storage_client

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def execute(
    group: CommandGroup,
    action: str | None,
    request_factory: Callable[..., Any],
    url: str | None = None,
    key: str | None = None,
    json_output: bool = False,
    verbose: bool = False,
) -> tuple[CommandResult, bool]:
    """
    Resolve, validate and run a single action.

    Every failure is folded into a CommandResult; nothing raises past this
    point. Returns the result and the effective output mode.
    """
    try:
        parsed_action = group.parse_action(action)
        config = resolve_config(
            url=url, key=key, json_output=json_output, verbose=verbose
        )
        request = request_factory(action=parsed_action)
        request.validate()

        client = get_storage_client(config)
        handler = group.handler_for(parsed_action)
        logger.debug("Dispatching %s %s", group.name, parsed_action)
        return handler(client, request), config.json_output

    except StowageError as e:
        return CommandResult.from_error(e), json_output
    except OSError as e:
        target = e.filename or "local file"
        return CommandResult.failure(f"{e.strerror or e}: {target}"), json_output
    except Exception as e:
        logger.debug("Unexpected failure in %s %s", group.name, action, exc_info=True)
        return CommandResult.failure(f"Unexpected error: {e}"), json_output


def run_command(
    group: CommandGroup,
    action: str | None,
    request_factory: Callable[..., Any],
    url: str | None = None,
    key: str | None = None,
    json_output: bool = False,
    verbose: bool = False,
) -> int:
    setup_logging(verbose)

    result, as_json = execute(
        group,
        action,
        request_factory,
        url=url,
        key=key,
        json_output=json_output,
        verbose=verbose,
    )

    if not result.ok:
        presenter.error(result.error, result.hint)
        return 1

    ResultPresenter(result).render(json_output=as_json)
    return 0
