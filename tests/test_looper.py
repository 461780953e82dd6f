#!/usr/bin/env python3
"""
Tests for the looper - the prompt, read, parse, apply cycle.
"""

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from revolver.commands import Command, CommandRegistry, NamedCommandParser
from revolver.commands.builtins import quit
from revolver.core import (
    AccessTerminalError,
    ApplicationError,
    ApplyOutcome,
    Description,
    ParseCommandError,
)
from revolver.looper import LastOutcome, Looper, Prompts, RunFlag, RunState
from revolver.terminal import MockTerminal, Print, ReadLine, lines


@dataclass
class Counter:
    state: int = 0


class Echo(Command):
    def __init__(self, num: int):
        self.num = num

    def apply(self, looper):
        looper.terminal.print_line(f"the number is {self.num}")
        return ApplyOutcome.APPLIED


class EchoParser(NamedCommandParser):
    def parse(self, s):
        try:
            num = int(s)
        except ValueError as e:
            raise ParseCommandError.convert(e) from e
        return Echo(num)

    def shorthand(self):
        return "e"

    def name(self):
        return "echo"

    def description(self):
        return Description()


class Respond(Command):
    """Returns or raises whatever it was configured with."""

    def __init__(self, response):
        self.response = response

    def apply(self, looper):
        looper.context.state += 1
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


class RespondParser(NamedCommandParser):
    def __init__(self, response, name="respond", shorthand="r"):
        self.response = response
        self._name = name
        self._shorthand = shorthand

    def parse(self, s):
        return self.parse_no_args(s, lambda: Respond(self.response))

    def shorthand(self):
        return self._shorthand

    def name(self):
        return self._name

    def description(self):
        return Description()


def looper_for(inputs, *parsers, context=None):
    term = MockTerminal(on_read_line=lines(inputs))
    registry = CommandRegistry([EchoParser(), quit.Parser(), *parsers])
    return Looper(term, registry, context if context is not None else Counter())


def invalid_int(text):
    try:
        int(text)
    except ValueError as e:
        return str(e)


# ============================================================================
# Run Flag Tests
# ============================================================================

class TestRunFlag:
    """Tests for RunFlag."""

    def test_default_stopped(self):
        flag = RunFlag()
        assert flag.state is RunState.STOPPED
        assert not flag.is_running()

    def test_start_stop(self):
        flag = RunFlag()
        flag.start()
        assert flag.is_running()
        flag.stop()
        assert flag.state is RunState.STOPPED


# ============================================================================
# Prompt Tests
# ============================================================================

class TestPrompts:
    """Tests for prompt selection."""

    def test_defaults(self):
        prompts = Prompts()
        assert LastOutcome.APPLIED.prompt(prompts) == "+>> "
        assert LastOutcome.SKIPPED.prompt(prompts) == "->> "
        assert LastOutcome.ERRED.prompt(prompts) == "!>> "

    def test_custom(self):
        prompts = Prompts(applied="ok> ", skipped="skip> ", erred="err> ")
        assert LastOutcome.ERRED.prompt(prompts) == "err> "

    def test_must_be_distinct(self):
        with pytest.raises(ValidationError):
            Prompts(applied="> ", skipped="> ", erred="! ")

    def test_from_apply(self):
        assert LastOutcome.from_apply(ApplyOutcome.APPLIED) is LastOutcome.APPLIED
        assert LastOutcome.from_apply(ApplyOutcome.SKIPPED) is LastOutcome.SKIPPED

    def test_from_apply_rejects_other_values(self):
        with pytest.raises(TypeError):
            LastOutcome.from_apply(None)


# ============================================================================
# Looper Tests
# ============================================================================

class TestLooper:
    """Tests for Looper.run()."""

    def test_exposes_components(self):
        context = Counter()
        looper = looper_for([], context=context)
        assert looper.context is context
        assert "echo" in looper.registry
        assert not looper.run_flag.is_running()
        looper.context.state = 1
        assert context.state == 1

    def test_echo_applied(self):
        looper = looper_for(["echo 1", "echo 2", "quit"])
        looper.run()

        assert looper.terminal.invocations == [
            Print("+>> "),
            ReadLine("echo 1"),
            Print("the number is 1\n"),
            Print("+>> "),
            ReadLine("echo 2"),
            Print("the number is 2\n"),
            Print("+>> "),
            ReadLine("quit"),
            Print("Exiting.\n"),
        ]
        assert not looper.run_flag.is_running()

    def test_shorthands(self):
        looper = looper_for(["e 7", "q"])
        looper.run()
        assert looper.terminal.printed() == ["+>> ", "the number is 7\n", "+>> ", "Exiting.\n"]

    def test_input_is_trimmed(self):
        looper = looper_for(["  echo 3  ", "quit"])
        looper.run()
        assert "the number is 3\n" in looper.terminal.printed()

    def test_parse_error_reprompts_same_level(self):
        looper = looper_for(["echo x", "echo 2", "quit"])
        looper.run()

        assert looper.terminal.invocations == [
            Print("+>> "),
            ReadLine("echo x"),
            Print(f"Invalid input: {invalid_int('x')}.\n"),
            Print("+>> "),
            ReadLine("echo 2"),
            Print("the number is 2\n"),
            Print("+>> "),
            ReadLine("quit"),
            Print("Exiting.\n"),
        ]

    def test_unknown_command_and_empty_line(self):
        looper = looper_for(["bogus", "", "quit"])
        looper.run()
        assert looper.terminal.printed() == [
            "+>> ",
            "Invalid input: no command parser for 'bogus'.\n",
            "+>> ",
            "Invalid input: empty command string.\n",
            "+>> ",
            "Exiting.\n",
        ]

    def test_skipped_prompt(self):
        looper = looper_for(["respond", "quit"], RespondParser(ApplyOutcome.SKIPPED))
        looper.run()
        assert looper.terminal.printed() == ["+>> ", "->> ", "Exiting.\n"]

    def test_application_error(self):
        looper = looper_for(
            ["respond", "quit"], RespondParser(ApplicationError("test error"))
        )
        looper.run()

        assert looper.terminal.invocations == [
            Print("+>> "),
            ReadLine("respond"),
            Print("Command error: test error.\n"),
            Print("!>> "),
            ReadLine("quit"),
            Print("Exiting.\n"),
        ]
        assert looper.context.state == 1

    def test_application_error_subclass(self):
        class Overdrawn(ApplicationError):
            pass

        looper = looper_for(["respond", "quit"], RespondParser(Overdrawn("account overdrawn")))
        looper.run()
        assert "Command error: account overdrawn.\n" in looper.terminal.printed()

    def test_error_prompt_then_recovery(self):
        looper = looper_for(
            ["fail", "echo 1", "quit"],
            RespondParser(ApplicationError("boom"), name="fail", shorthand=None),
        )
        looper.run()
        assert looper.terminal.printed() == [
            "+>> ",
            "Command error: boom.\n",
            "!>> ",
            "the number is 1\n",
            "+>> ",
            "Exiting.\n",
        ]

    def test_parse_error_keeps_error_prompt(self):
        looper = looper_for(
            ["fail", "echo x", "quit"],
            RespondParser(ApplicationError("boom"), name="fail", shorthand=None),
        )
        looper.run()
        assert looper.terminal.printed()[2:5] == [
            "!>> ",
            f"Invalid input: {invalid_int('x')}.\n",
            "!>> ",
        ]

    def test_access_terminal_error_from_apply(self):
        looper = looper_for(
            ["respond", "quit"], RespondParser(AccessTerminalError("test error"))
        )
        with pytest.raises(AccessTerminalError) as exc:
            looper.run()

        assert str(exc.value) == "test error"
        assert looper.terminal.invocations == [Print("+>> "), ReadLine("respond")]

    def test_read_failure_propagates(self):
        looper = looper_for(["echo 1"])
        with pytest.raises(AccessTerminalError) as exc:
            looper.run()

        assert str(exc.value) == "no more lines"
        assert looper.terminal.invocations[-1] == ReadLine(error="no more lines")

    def test_print_failure_propagates(self):
        def on_print(s):
            if s.startswith("Command error"):
                raise AccessTerminalError("disconnected")

        term = MockTerminal(on_read_line=lines(["respond", "quit"]), on_print=on_print)
        registry = CommandRegistry([RespondParser(ApplicationError("boom")), quit.Parser()])
        looper = Looper(term, registry, Counter())

        with pytest.raises(AccessTerminalError):
            looper.run()
        assert term.invocations[-1] == Print("Command error: boom.\n", "disconnected")

    def test_custom_prompts(self):
        term = MockTerminal(on_read_line=lines(["quit"]))
        registry = CommandRegistry([quit.Parser()])
        looper = Looper(term, registry, prompts=Prompts(applied="$ ", skipped="~ ", erred="! "))
        looper.run()
        assert term.printed() == ["$ ", "Exiting.\n"]

    def test_run_is_restartable(self):
        looper = looper_for(["respond", "quit", "respond", "quit"], RespondParser(ApplyOutcome.SKIPPED))
        looper.run()
        assert looper.context.state == 1

        looper.run()
        assert looper.context.state == 2
        # Each run starts at the applied prompt
        assert looper.terminal.printed() == [
            "+>> ", "->> ", "Exiting.\n",
            "+>> ", "->> ", "Exiting.\n",
        ]

    def test_run_restarts_after_failure(self):
        looper = looper_for(["respond", "quit"], RespondParser(AccessTerminalError("gone")))
        with pytest.raises(AccessTerminalError):
            looper.run()

        looper.terminal.on_read_line = lines(["quit"])
        looper.run()
        assert looper.terminal.printed()[-2:] == ["+>> ", "Exiting.\n"]

    def test_stop_takes_effect_after_apply(self):
        class StopAndPrint(Command):
            def apply(self, looper):
                looper.run_flag.stop()
                looper.terminal.print_line("still running")
                return ApplyOutcome.SKIPPED

        class StopParser(NamedCommandParser):
            def parse(self, s):
                return StopAndPrint()

            def name(self):
                return "stop"

            def description(self):
                return Description()

        term = MockTerminal(on_read_line=lines(["stop"]))
        looper = Looper(term, CommandRegistry([StopParser()]))
        looper.run()
        assert term.printed() == ["+>> ", "still running\n"]
