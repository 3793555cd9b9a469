"""
Host-level exceptions.

Inside the language, problems travel as values: the parser collects error
strings and the evaluator returns ``Error`` objects. These exceptions exist
only for Python callers that ask for a finished result (batch helpers, the
CLI) and need a way to say "there is no result".
"""


class OqError(Exception):
    """Base class for oQ host errors"""
    pass


class ParseError(OqError):
    """Source failed to parse; ``errors`` holds every parser message in order."""

    def __init__(self, errors):
        self.errors = list(errors)
        count = len(self.errors)
        super().__init__(f"parsing failed with {count} error{'s' if count != 1 else ''}")


class SourceError(OqError):
    """A source file could not be read or decoded"""
    pass
