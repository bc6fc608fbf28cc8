"""
Exception hierarchy for the BrowserTools bridge.

Each exception's ``str()`` is the message shown to the user.
"""


class CommandError(Exception):
    """Base class for every error a command invocation can surface."""


class UnknownCommand(CommandError):
    """The (command, argument) pair is not in the command table."""

    def __init__(self, command: str, argument: str = ""):
        self.command = command
        self.argument = argument
        super().__init__(f"Unknown command or argument: {command} {argument}")


class UnknownSlashCommand(UnknownCommand):
    """Completion was requested for a command name that does not exist."""

    def __init__(self, command: str):
        self.command = command
        self.argument = ""
        CommandError.__init__(self, f'unknown slash command: "{command}"')


class MissingArgument(CommandError):
    def __init__(self):
        super().__init__("No argument provided. Please select an option.")


class TransportError(CommandError):
    """Request construction, network or decoding failure."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(cause)
