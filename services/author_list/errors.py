"""Errors raised while generating the contributor list."""


class AuthorListError(Exception):
    """Base class for contributor list generation failures."""


class HistoryUnavailable(AuthorListError):
    """Raised when the Git history cannot be queried."""

    def __init__(self, repo_path: str, reason: str):
        self.repo_path = repo_path
        self.reason = reason
        super().__init__(f"Cannot read Git history at {repo_path}: {reason}")


class MalformedHistoryLine(AuthorListError):
    """Raised when a history line lacks the name/email delimiter."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed history line: {line!r}")
