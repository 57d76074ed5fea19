from __future__ import annotations


class ToolConfigurationError(Exception):
    """A dependency tool is missing or could not be executed.

    Carries a link to the documentation that explains how to fix it.
    """

    def __init__(self, message: str, help_url: str):
        super().__init__(message)
        self.help_url = help_url


class NoSupportedProjectError(Exception):
    """None of the registered manifests exist in the project root."""

    def __init__(self, message: str = "Could not detect a supported project type."):
        super().__init__(message)
