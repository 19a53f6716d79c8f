class InvalidRootError(ValueError):
    """Raised when the report root does not exist or is not a directory."""

    def __init__(self, root, reason="does not exist"):
        self.root = root
        self.reason = reason
        super().__init__(f"Invalid root {root}: {reason}")


class ReportCancelled(Exception):
    """Raised when a caller sets the cancel event while a report is running."""
