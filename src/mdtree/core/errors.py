"""Parse errors raised by the block matcher and the frontmatter loader"""


class ParseError(ValueError):
    """Base class for all document parse failures."""


class UnmatchedBlockError(ParseError):
    """No block rule matched the remaining body text."""

    def __init__(self, remaining: str):
        self.remaining = remaining
        preview = remaining if len(remaining) <= 60 else remaining[:57] + "..."
        super().__init__(f"No matching block found for input: {preview!r}")


class MalformedBlockLiteralError(ParseError):
    """A block rule matched but a required part of the literal is unusable."""

    def __init__(self, kind: str, literal: str, reason: str):
        self.kind = kind
        self.literal = literal
        super().__init__(f"Invalid {kind} block ({reason}): {literal!r}")


class FrontmatterError(ParseError):
    """The metadata header could not be loaded."""
