class CommitArtError(Exception):
    """Base class for failures that abort a run."""


class InputError(CommitArtError):
    """Raised when the text, image or numeric options cannot be used."""


class UnsupportedGlyphError(InputError):
    """Raised when the text contains a character the font does not draw."""

    def __init__(self, char: str):
        super().__init__(f"unsupported character {char!r}")
        self.char = char


class InvalidImageShapeError(InputError):
    """Raised when an image does not decode to exactly 7 pixel rows."""


class HistoryConflictError(CommitArtError):
    """Raised when the repository already has commits after the start date."""


class SourceUnavailableError(CommitArtError):
    """Raised when existing contributions cannot be fetched."""


class SinkError(CommitArtError):
    """Raised when git fails to create a commit."""
