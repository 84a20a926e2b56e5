"""Custom exceptions for No Response operations"""

from typing import Optional


class NoResponseError(Exception):
    """Base exception for No Response operations"""
    pass


class ConfigurationError(NoResponseError):
    """Configuration or event payload issues"""
    pass


class GitHubAPIError(NoResponseError):
    """GitHub API call failures"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GitHubNotFoundError(GitHubAPIError):
    """GitHub API returned 404 for the requested resource"""
    pass


class LabelAlreadyExistsError(GitHubAPIError):
    """Label creation rejected because the label already exists"""
    pass
