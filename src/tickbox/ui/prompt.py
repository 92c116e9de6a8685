"""Rich + readchar runtime for the checkbox prompt."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

import readchar
from rich.console import Console
from rich.live import Live

from tickbox.config import PromptConfig
from tickbox.dispatcher import KeymapDispatcher, initial_snapshot
from tickbox.errors import PromptCancelled
from tickbox.keys import KeyName, decode_key
from tickbox.models import Snapshot, Status
from tickbox.store import SnapshotStore
from tickbox.ui.panel_builder import paginate
from tickbox.ui.render import DEFAULT_PANEL_WIDTH, render, render_answer

logger = logging.getLogger("tickbox.prompt")

LIVE_REFRESH_RATE = 20


class CheckboxPrompt:
    """Interactive multi-select bound to a terminal.

    Example:
        prompt = CheckboxPrompt(PromptConfig(
            choices=["apple", Separator(), "banana", Choice("cherry", disabled="sold out")],
            message="Pick fruit",
            required=True,
        ))
        values = prompt.run()  # ("apple",) etc.

    Construction raises ConfigurationError when nothing is selectable.
    """

    def __init__(
        self,
        config: PromptConfig,
        console: Console | None = None,
        read_key: Callable[[], str] | None = None,
    ):
        self.config = config
        self.store = SnapshotStore(initial_snapshot(config))
        self.dispatcher = KeymapDispatcher(self.store, config)
        self._console = console or Console()
        self._read_key = read_key or readchar.readkey
        self._scroll_offset = 0

    def frame(self, snapshot: Snapshot | None = None):
        """Renderable for ``snapshot`` (the current one by default)."""
        snapshot = snapshot or self.store.read()
        page = paginate(
            len(snapshot.items),
            snapshot.active,
            self.config.page_size,
            self.config.loop,
            self._scroll_offset,
        )
        self._scroll_offset = page.scroll_offset
        width = min(DEFAULT_PANEL_WIDTH, self._console.width or DEFAULT_PANEL_WIDTH)
        return render(snapshot, self.config, page, width=width)

    async def run_async(self) -> tuple[Any, ...]:
        """Read keys until the selection is confirmed.

        Raises:
            PromptCancelled: On Ctrl+C.
        """
        with Live(
            self.frame(),
            console=self._console,
            refresh_per_second=LIVE_REFRESH_RATE,
            auto_refresh=False,
            transient=True,
        ) as live:
            unsubscribe = self.store.subscribe(
                lambda snap: live.update(self.frame(snap), refresh=True)
            )
            try:
                while self.store.read().status is Status.PENDING:
                    try:
                        raw = await asyncio.to_thread(self._read_key)
                    except KeyboardInterrupt:
                        logger.debug("prompt cancelled")
                        raise PromptCancelled() from None

                    event = decode_key(raw)
                    if event.name is KeyName.INTERRUPT:
                        logger.debug("prompt cancelled")
                        raise PromptCancelled()
                    await self.dispatcher.dispatch(event)
            finally:
                unsubscribe()

        snapshot = self.store.read()
        self._console.print(render_answer(snapshot, self.config))
        return snapshot.answer or ()

    def run(self) -> tuple[Any, ...]:
        """Blocking variant of :meth:`run_async`."""
        return asyncio.run(self.run_async())


def checkbox(message: str, choices: Sequence[Any], **options: Any) -> tuple[Any, ...]:
    """Ask for a multi-selection and return the checked values in list order."""
    return CheckboxPrompt(PromptConfig(choices=choices, message=message, **options)).run()
