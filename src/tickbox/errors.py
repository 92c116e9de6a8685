"""Exceptions raised by tickbox."""


class TickboxError(Exception):
    """Base class for tickbox errors."""


class ConfigurationError(TickboxError, ValueError):
    """Prompt cannot be built from the given options.

    Raised at construction time, before anything is drawn.
    """


class PromptCancelled(KeyboardInterrupt):
    """User aborted the prompt with Ctrl+C."""
