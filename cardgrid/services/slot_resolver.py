"""Slot resolver - turns a free-text query into a card image."""

import asyncio
import logging
import threading
from concurrent.futures import Executor
from typing import Callable, Protocol

from ..models.config import SlotSettings
from ..models.slot import Command, SlotState, SlotView

logger = logging.getLogger(__name__)


class ImageLookup(Protocol):
    def find_image_url(self, query: str, cancel: threading.Event | None = None) -> str: ...


ChangeListener = Callable[["SlotResolver", list[Command]], None]


class SlotResolver:
    """
    Query-to-image state machine for one grid slot.

    Transitions run on the event loop thread. Synchronous transitions
    return the UI commands they produce; every transition, including the
    ones triggered by a finished lookup, also queues its commands (see
    drain_commands) and reports them to on_change.

    Lookups are fire-and-forget: submit_query must be called from a
    running event loop when the query is non-empty. The blocking client
    call runs on executor (the loop's default one when None) and gets a
    cancel event that is set when the slot closes or the lookup times out.
    """

    def __init__(
        self,
        client: ImageLookup,
        settings: SlotSettings | None = None,
        on_change: ChangeListener | None = None,
        name: str = "",
        executor: Executor | None = None,
    ):
        self.client = client
        self.settings = settings or SlotSettings()
        self.on_change = on_change
        self.name = name
        self.executor = executor

        self.state = SlotState.IDLE
        self.query = ""
        self.input_visible = False
        self._image_url: str | None = None   # None until something is applied
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()
        self._cancels: dict[int, threading.Event] = {}   # generation -> cancel token
        self._commands: list[Command] = []
        self._closed = False

    def __repr__(self) -> str:
        return f"SlotResolver({self.name!r}, state={self.state.value})"

    # --- queries ---

    def current_image(self) -> str:
        return self._image_url or self.settings.card_back_url

    def current_state(self) -> SlotState:
        return self.state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        """Number of lookups not finished yet (stale ones included)."""
        return len(self._tasks)

    def snapshot(self) -> SlotView:
        return SlotView(
            state=self.state,
            image_url=self.current_image(),
            query=self.query,
            input_visible=self.input_visible,
            generation=self._generation,
        )

    def drain_commands(self) -> list[Command]:
        """Return and clear the queued UI commands."""
        commands, self._commands = self._commands, []
        return commands

    # --- user events ---

    def mount(self) -> list[Command]:
        """Slot appeared on screen."""
        self._check_open()
        if not self.settings.show_input_on_mount:
            return []
        self.state = SlotState.EDITING
        self.input_visible = True
        return self._emit([Command.SHOW_INPUT, Command.FOCUS_INPUT])

    def click_image(self) -> list[Command]:
        """Re-open the input; the displayed image stays until the next submit."""
        self._check_open()
        if self.state is SlotState.EDITING:
            return []
        self.state = SlotState.EDITING
        self.input_visible = True
        return self._emit([Command.SHOW_INPUT, Command.FOCUS_INPUT])

    def submit_query(self, text: str) -> list[Command]:
        """
        Commit the input value (input lost focus).

        An empty query resets the slot to the fallback image. Anything
        else hides the input right away and starts a lookup whose result
        lands later. A newer submit supersedes every older lookup.
        """
        self._check_open()
        loop = asyncio.get_running_loop() if text else None
        self.query = text
        self._generation += 1
        self.input_visible = False

        if not text:
            self.state = SlotState.IDLE
            self._image_url = self.settings.fallback_image_url
            return self._emit([Command.HIDE_INPUT])

        self.state = SlotState.LOOKING_UP
        generation = self._generation
        cancel = threading.Event()
        self._cancels[generation] = cancel
        task = loop.create_task(self._lookup(generation, text, cancel))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(lambda _: self._cancels.pop(generation, None))
        logger.debug(f"[{self.name}] lookup #{generation} issued: {text!r}")
        return self._emit([Command.HIDE_INPUT])

    # --- lifecycle ---

    async def wait(self) -> None:
        """Wait until every lookup issued so far has finished."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        """Destroy the slot, cancelling in-flight lookups."""
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        for cancel in self._cancels.values():
            cancel.set()
        for task in list(self._tasks):
            task.cancel()

    # --- internals ---

    async def _lookup(self, generation: int, text: str, cancel: threading.Event) -> None:
        loop = asyncio.get_running_loop()
        started = asyncio.Event()

        def run() -> str:
            if not loop.is_closed():
                loop.call_soon_threadsafe(started.set)
            return self.client.find_image_url(text, cancel=cancel)

        try:
            future = loop.run_in_executor(self.executor, run)
            # Consume the outcome even when nobody awaits the future any more.
            future.add_done_callback(lambda f: f.cancelled() or f.exception())
            # Time spent queued for a worker does not count against the timeout.
            await started.wait()
            url = await asyncio.wait_for(future, timeout=self.settings.lookup_timeout)
        except asyncio.CancelledError:
            cancel.set()
            raise
        except asyncio.TimeoutError:
            cancel.set()
            if self._is_stale(generation, text):
                return
            logger.warning(f"[{self.name}] lookup for {text!r} timed out")
            self._fail()
            return
        except Exception as e:
            if self._is_stale(generation, text):
                return
            logger.warning(f"[{self.name}] lookup for {text!r} failed: {e}")
            self._fail()
            return

        if self._is_stale(generation, text):
            return
        logger.info(f"[{self.name}] {text!r} -> {url}")
        self.state = SlotState.RESOLVED
        self._image_url = url
        self.input_visible = False
        self._emit([Command.HIDE_INPUT])

    def _is_stale(self, generation: int, text: str) -> bool:
        if generation == self._generation:
            return False
        logger.debug(f"[{self.name}] discarding stale lookup #{generation} for {text!r}")
        return True

    def _fail(self) -> None:
        self.state = SlotState.FAILED
        self._image_url = self.settings.fallback_image_url
        self.input_visible = True
        self._emit([Command.SHOW_INPUT, Command.FOCUS_INPUT])

    def _emit(self, commands: list[Command]) -> list[Command]:
        self._commands.extend(commands)
        if self.on_change:
            self.on_change(self, list(commands))
        return commands

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"Slot {self.name!r} is closed")
