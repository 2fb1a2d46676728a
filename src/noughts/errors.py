"""Exceptions raised by the game and its console collaborators."""


class NoughtsError(Exception):
    pass


class MalformedInputError(NoughtsError):
    """Console input that does not parse as a base-10 integer. Fatal to the game."""

    def __init__(self, text: str):
        super().__init__(f"There was an error trying to convert {text!r}")
        self.text = text


class InvalidBoardError(NoughtsError, ValueError):
    pass
