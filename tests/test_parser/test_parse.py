import logging

import pytest

from flagkit.exceptions import FlagParseError
from flagkit.parser import FlagSet, ParseOutcome
from flagkit.providers import StaticArgumentSource
from flagkit.signals import HelpSignal


@pytest.fixture
def declared(flag_set):
    return {
        "verbose": flag_set.declare_boolean("verbose", "Verbose output", alias="v"),
        "config": flag_set.declare_string(
            "config", "Config file", alias="c", default="default.json"
        ),
        "port": flag_set.declare_number("port", "Port number", alias="p"),
        "include": flag_set.declare_string_list("include", "Include paths", alias="i"),
    }


def test_aliases_with_values(flag_set, declared):
    result = flag_set.parse(["-v", "-c", "user.json"])
    assert result.outcome is ParseOutcome.APPLIED
    assert result.ok
    assert declared["verbose"].value is True
    assert declared["config"].value == "user.json"
    assert declared["config"].is_set
    assert not declared["port"].is_set


def test_long_options(flag_set, declared):
    result = flag_set.parse(["--verbose", "--config", "prod.json", "--port=8080", "restArg"])
    assert declared["verbose"].value is True
    assert declared["config"].value == "prod.json"
    assert declared["port"].value == 8080
    assert result.remaining == ["restArg"]


def test_full_name_with_single_dash(flag_set, declared):
    flag_set.parse_or_raise(["-verbose", "-config", "full.json"])
    assert declared["verbose"].value is True
    assert declared["config"].value == "full.json"


def test_alias_and_long_name_resolve_to_same_flag(sink):
    states = []
    for tokens in (["-v", "-p", "3000"], ["--verbose", "--port", "3000"]):
        flags = FlagSet("x", output=sink)
        flags.declare_boolean("verbose", alias="v")
        flags.declare_number("port", alias="p")
        flags.parse_or_raise(tokens)
        states.append(
            {flag.name: (flag.value, flag.is_set) for flag in flags}
        )
    assert states[0] == states[1]


def test_invalid_number_names_flag_and_value(flag_set, declared):
    with pytest.raises(FlagParseError) as excinfo:
        flag_set.parse_or_raise(["--port", "not-a-number"])
    assert excinfo.value.flag_name == "port"
    assert excinfo.value.offending_value == "not-a-number"


def test_invalid_inline_boolean(flag_set, declared):
    result = flag_set.parse(["--verbose=maybe"])
    assert result.outcome is ParseOutcome.FAILED
    assert result.error.flag_name == "verbose"
    assert result.error.offending_value == "maybe"


def test_string_list_accumulates(flag_set, declared):
    flag_set.parse_or_raise(["--include", "a", "-i", "b", "--include=c"])
    assert declared["include"].value == ["a", "b", "c"]


def test_terminator_stops_flag_interpretation(flag_set, declared):
    remaining = flag_set.parse_or_raise(["--verbose", "--", "--config", "x"])
    assert declared["verbose"].value is True
    assert declared["config"].value == "default.json"
    assert not declared["config"].is_set
    assert remaining == ["--config", "x"]
    assert flag_set.remaining_args == ["--config", "x"]


def test_unknown_flag_after_terminator_is_ignored(flag_set, declared):
    result = flag_set.parse(["--", "--bogus"])
    assert result.ok
    assert result.remaining == ["--bogus"]


@pytest.mark.parametrize("token", ["-h", "--help", "-help", "--h", "-h=1"])
def test_help_raises_signal(flag_set, declared, token):
    with pytest.raises(HelpSignal):
        flag_set.parse_or_raise([token])
    assert not any(flag.is_set for flag in flag_set)


def test_help_reported_as_outcome(flag_set, declared):
    result = flag_set.parse(["-v", "--help", "--bogus"])
    assert result.outcome is ParseOutcome.HELP_REQUESTED
    assert result.help_requested
    assert result.error is None
    assert declared["verbose"].value is True
    assert result.remaining == ["--bogus"]


def test_help_takes_priority_over_later_errors(flag_set, declared):
    result = flag_set.parse(["--help", "--port", "nope"])
    assert result.outcome is ParseOutcome.HELP_REQUESTED


def test_errors_before_help_win(flag_set, declared):
    result = flag_set.parse(["--bogus", "--help"])
    assert result.outcome is ParseOutcome.FAILED


def test_help_does_not_mark_parsed(flag_set, declared):
    flag_set.parse(["-h"])
    assert flag_set.is_parsed is False


def test_help_after_partial_progress_is_reset_on_next_parse(flag_set, declared):
    flag_set.parse(["-v", "-h"])
    assert declared["verbose"].value is True
    flag_set.parse([])
    assert declared["verbose"].value is False


@pytest.mark.parametrize("tokens", [["--unknown"], ["-u"]])
def test_unknown_flag(flag_set, declared, tokens):
    with pytest.raises(FlagParseError) as excinfo:
        flag_set.parse_or_raise(tokens)
    assert excinfo.value.reason == "unknown flag"
    assert excinfo.value.flag_name == tokens[0].lstrip("-")


def test_missing_value_at_end(flag_set, declared):
    with pytest.raises(FlagParseError) as excinfo:
        flag_set.parse_or_raise(["--port"])
    assert excinfo.value.flag_name == "port"
    assert excinfo.value.reason == "requires a value"
    assert str(excinfo.value) == "Flag 'port': requires a value"


def test_flag_shaped_token_is_never_a_value(flag_set, declared):
    with pytest.raises(FlagParseError) as excinfo:
        flag_set.parse_or_raise(["-p", "--verbose"])
    assert excinfo.value.flag_name == "port"
    assert declared["verbose"].value is False


def test_negative_number_needs_inline_syntax(flag_set, declared):
    with pytest.raises(FlagParseError):
        flag_set.parse_or_raise(["--port", "-5"])
    flag_set.parse_or_raise(["--port=-5"])
    assert declared["port"].value == -5


def test_inline_value_takes_precedence(flag_set, declared):
    result = flag_set.parse(["--port=8080", "9090"])
    assert declared["port"].value == 8080
    assert result.remaining == ["9090"]


def test_inline_value_may_be_empty_or_contain_equals(flag_set, declared):
    flag_set.parse_or_raise(["--config=", "-i=a=b"])
    assert declared["config"].value == ""
    assert declared["config"].is_set
    assert declared["include"].value == ["a=b"]


def test_boolean_does_not_consume_next_token(flag_set, declared):
    result = flag_set.parse(["-v", "false"])
    assert declared["verbose"].value is True
    assert result.remaining == ["false"]


@pytest.mark.parametrize("token, expected", [("--verbose=false", False), ("-v=1", True)])
def test_boolean_inline_value(flag_set, declared, token, expected):
    flag_set.parse_or_raise([token])
    assert declared["verbose"].value is expected
    assert declared["verbose"].is_set


@pytest.mark.parametrize("token", ["---verbose", "--=x", "-=x", "----"])
def test_malformed_syntax(flag_set, declared, token):
    with pytest.raises(FlagParseError) as excinfo:
        flag_set.parse_or_raise([token])
    assert excinfo.value.reason == "invalid flag syntax"
    assert excinfo.value.offending_value == token
    assert excinfo.value.flag_name is None


@pytest.mark.parametrize("tokens", [["serve", "-v"], ["-", "-v"]])
def test_non_flag_stops_parsing(flag_set, declared, tokens):
    result = flag_set.parse(tokens)
    assert result.ok
    assert declared["verbose"].value is False
    assert result.remaining == tokens


def test_no_rollback_on_error(flag_set, declared):
    result = flag_set.parse(["-v", "-c", "applied.json", "--port", "bad", "-i", "never"])
    assert result.outcome is ParseOutcome.FAILED
    assert declared["verbose"].value is True
    assert declared["config"].value == "applied.json"
    assert declared["include"].value == []
    assert flag_set.is_parsed is True
    assert result.remaining == ["-i", "never"]


def test_repeated_parse_resets_first(flag_set, declared):
    flag_set.parse(["--verbose", "--config", "first.json", "-i", "a"])
    assert declared["verbose"].value is True
    assert declared["config"].value == "first.json"

    flag_set.parse(["--config", "second.json", "-i", "b"])
    assert declared["verbose"].value is False
    assert declared["verbose"].is_set is False
    assert declared["config"].value == "second.json"
    assert declared["include"].value == ["b"]


def test_string_list_reset_restores_original_default(sink):
    flags = FlagSet("x", output=sink)
    include = flags.declare_string_list("include", alias="i", default=["base"])
    flags.parse(["-i", "one", "-i", "two"])
    assert include.value == ["base", "one", "two"]
    flags.reset()
    assert include.value == ["base"]
    flags.parse(["-i", "three"])
    assert include.value == ["base", "three"]


def test_is_parsed_lifecycle(flag_set, declared):
    assert flag_set.is_parsed is False
    flag_set.parse([])
    assert flag_set.is_parsed is True
    flag_set.reset()
    assert flag_set.is_parsed is False
    assert flag_set.remaining_args == []


def test_args_default_to_argument_source(sink):
    flags = FlagSet(
        "x", argument_source=StaticArgumentSource(["-v", "tail"]), output=sink
    )
    verbose = flags.declare_boolean("verbose", alias="v")
    result = flags.parse()
    assert verbose.value is True
    assert result.remaining == ["tail"]


def test_explicit_empty_args_ignore_argument_source(sink):
    flags = FlagSet("x", argument_source=StaticArgumentSource(["-v"]), output=sink)
    verbose = flags.declare_boolean("verbose", alias="v")
    flags.parse([])
    assert verbose.value is False


def test_raise_for_outcome(flag_set, declared):
    flag_set.parse([]).raise_for_outcome()
    with pytest.raises(HelpSignal):
        flag_set.parse(["-h"]).raise_for_outcome()
    with pytest.raises(FlagParseError):
        flag_set.parse(["--nope"]).raise_for_outcome()


def test_as_dict_and_namespace(sink):
    flags = FlagSet("x", output=sink)
    flags.declare_boolean("dry-run")
    flags.declare_number("retries", default=3)
    flags.parse(["--dry-run", "--retries", "5"])
    assert flags.as_dict() == {"dry-run": True, "retries": 5}
    namespace = flags.to_namespace()
    assert namespace.dry_run is True
    assert namespace.retries == 5


def test_parse_logs_applied_flags(flag_set, declared, caplog):
    caplog.set_level(logging.DEBUG, logger="flagkit")
    flag_set.parse(["-v", "--port", "80"])
    assert "Applied flag 'verbose' = True" in caplog.text
    assert "Applied flag 'port' = 80.0" in caplog.text
