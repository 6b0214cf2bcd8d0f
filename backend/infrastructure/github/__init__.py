from infrastructure.github.errors import RemoteError
from infrastructure.github.github_client import GitHubClient

__all__ = ["GitHubClient", "RemoteError"]
