from qsvault.github.client import GitHubIssueClient, client_for_issue

__all__ = ["GitHubIssueClient", "client_for_issue"]
