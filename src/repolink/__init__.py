"""repolink: open a local git checkout's files, lines and pull requests on GitHub."""

__version__ = "0.1.0"
