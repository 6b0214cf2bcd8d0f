class RemoteError(RuntimeError):
    """Raised when the GitHub API answers with a non-success status or unreadable content."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"GitHub API error ({status}): {message}")
