from enum import StrEnum

import pytest

from stowage.core.models import (
    ArgumentError,
    CommandGroup,
    CommandResult,
    ConfigurationError,
)
from stowage.services.storage.domains.bucket.actions import (
    BUCKET_COMMANDS,
    BucketAction,
)
from stowage.services.storage.domains.file.actions import FILE_COMMANDS, FileAction
from stowage.services.storage.domains.url.actions import URL_COMMANDS, UrlAction


class Color(StrEnum):
    RED = "red"
    BLUE = "blue"


def _noop(client, request):
    return CommandResult()


def test_group_rejects_missing_handlers():
    with pytest.raises(ValueError, match="blue"):
        CommandGroup(name="color", actions=Color, handlers={Color.RED: _noop})


def test_parse_action_known_token():
    group = CommandGroup(
        name="color", actions=Color, handlers={Color.RED: _noop, Color.BLUE: _noop}
    )
    assert group.parse_action("blue") is Color.BLUE


def test_parse_action_unknown_token_lists_choices():
    group = CommandGroup(
        name="color", actions=Color, handlers={Color.RED: _noop, Color.BLUE: _noop}
    )

    with pytest.raises(ArgumentError) as exc_info:
        group.parse_action("green")

    assert "Unknown action: green" in exc_info.value.message
    assert "red, blue" in exc_info.value.message


def test_parse_action_missing_token():
    with pytest.raises(ArgumentError, match="Action required"):
        BUCKET_COMMANDS.parse_action(None)


@pytest.mark.parametrize(
    "group,actions",
    [
        (BUCKET_COMMANDS, BucketAction),
        (FILE_COMMANDS, FileAction),
        (URL_COMMANDS, UrlAction),
    ],
)
def test_every_action_has_a_handler(group, actions):
    for action in actions:
        assert callable(group.handler_for(action))


def test_url_choices_use_hyphenated_tokens():
    assert URL_COMMANDS.choices == ["public", "signed", "signed-upload", "signed-urls"]


def test_command_result_failure_from_error():
    result = CommandResult.from_error(
        ConfigurationError("Storage key not set", hint="Set it")
    )

    assert not result.ok
    assert result.error == "Storage key not set"
    assert result.hint == "Set it"


def test_command_result_ok_by_default():
    assert CommandResult(data=[1, 2]).ok
