"""Confirm-time check over the checked choices."""

from __future__ import annotations

import inspect
import logging

from tickbox.config import INVALID_MESSAGE, Validator
from tickbox.models import Choice

logger = logging.getLogger("tickbox.validation")


class ValidationGate:
    """Runs the caller's predicate, which may be sync or async.

    Only a literal ``True`` passes. ``False`` fails with the default message and
    any string fails with that string as the message.
    """

    def __init__(self, predicate: Validator):
        self._predicate = predicate

    async def check(self, selection: list[Choice]) -> tuple[bool, str | None]:
        result = self._predicate(list(selection))
        if inspect.isawaitable(result):
            result = await result

        if result is True:
            logger.debug("validation passed for %d choice(s)", len(selection))
            return True, None

        message = result if isinstance(result, str) and result else INVALID_MESSAGE
        logger.debug("validation rejected selection: %s", message)
        return False, message
