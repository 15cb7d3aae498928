"""Generate README files from a project's manifest, env example and layout."""

__version__ = "0.1.0"
