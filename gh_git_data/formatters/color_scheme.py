"""Color scheme definitions for output formatting."""


class ColorScheme:
    """Color definitions for console output."""

    # Reference kind colors
    BRANCH = "green"
    TAG = "yellow"
    OTHER = "dim"

    # Header colors
    HEADER = "bold cyan"

    # Table colors
    TABLE_HEADER = "bold magenta"
    REF_NAME = "cyan"
    SHA = "dim"

    # Verification
    VERIFIED = "green"
    UNVERIFIED = "red"
