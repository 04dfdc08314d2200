"""Build GitHub URLs for files, trees and pull requests."""

from repolink.core.exceptions import MalformedRepositoryUrlError
from repolink.git.patterns import parse_repository_url


class URLBuilder:
    """Joins a repository URL, a reference and a path into a GitHub link.

    Produces:
    - File: https://github.com/org/repo/blob/main/doc.md#L42
    - Tree: https://github.com/org/repo/tree/main
    - Pull request: https://github.com/org/repo/pull/10

    Path segments are inserted as-is, without percent-encoding.
    """

    def file_url(
        self,
        repository_url: str,
        ref: str,
        relative_path: str,
        line: int | None = None,
        end_line: int | None = None,
    ) -> str:
        url = f"{repository_url.rstrip('/')}/blob/{ref}/{relative_path}"
        if line:
            url += f"#L{line}"
            if end_line and end_line > line:
                url += f"-L{end_line}"
        return url

    def tree_url(self, repository_url: str, ref: str) -> str:
        return f"{repository_url.rstrip('/')}/tree/{ref}"

    def pull_request_url(self, repository_url: str, number: int) -> str:
        repository = parse_repository_url(repository_url)
        if repository is None:
            raise MalformedRepositoryUrlError(details={"repository_url": repository_url})
        return f"{repository.url}/pull/{number}"
