class ArgumentError(Exception):
    def __init__(self, program: str, argument: str | None = None):
        self.program = program
        self.argument = argument


class TooManyArgumentsError(ArgumentError):
    def __str__(self) -> str:
        return f"Too many arguments to test program {self.program}"


class UnrecognizedOptionError(ArgumentError):
    def __str__(self) -> str:
        return f'Unrecognized option "{self.argument}" for test program {self.program}'


class InvalidTestNameError(ValueError):
    def __init__(self, suite: str, name: str, reason: str):
        self.suite = suite
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        msg = f"invalid test name {self.name!r}"
        if self.suite:
            msg += f" in suite {self.suite!r}"
        return f"{msg}: {self.reason}"


class RegistryNotAliveError(RuntimeError):
    def __str__(self) -> str:
        return "test registry accessed while no registry guard is alive"
