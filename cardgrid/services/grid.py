"""Grid controller - a resizable list of categories, each a fixed grid of slots."""

import logging
from concurrent.futures import Executor
from typing import Callable

from ..models.config import GridLayout, SlotSettings
from ..models.slot import Command
from ..utils import parse_category_count, slot_name
from .slot_resolver import ChangeListener, ImageLookup, SlotResolver

logger = logging.getLogger(__name__)

SlotFactory = Callable[[str], SlotResolver]


def make_slot_factory(
    client: ImageLookup,
    settings: SlotSettings | None = None,
    on_change: ChangeListener | None = None,
    executor: Executor | None = None,
) -> SlotFactory:
    """Build a factory producing independent resolvers that share a client and executor."""
    def factory(name: str) -> SlotResolver:
        return SlotResolver(
            client, settings=settings, on_change=on_change, name=name, executor=executor
        )
    return factory


class Category:
    """A titled group of slots laid out as rows x columns."""

    def __init__(self, category_id: int, slot_factory: SlotFactory, layout: GridLayout | None = None):
        self.category_id = category_id
        self.layout = layout or GridLayout()
        self.title = ""
        self.slots: tuple[SlotResolver, ...] = tuple(
            slot_factory(slot_name(category_id, i))
            for i in range(self.layout.slots_per_category)
        )

    def __repr__(self) -> str:
        return f"Category({self.category_id}, title={self.title!r})"

    def set_title(self, title: str) -> None:
        self.title = title

    def slot(self, row: int, column: int) -> SlotResolver:
        if not (0 <= row < self.layout.rows and 0 <= column < self.layout.columns):
            raise IndexError(
                f"Slot ({row}, {column}) outside {self.layout.rows}x{self.layout.columns} grid"
            )
        return self.slots[row * self.layout.columns + column]

    def mount(self) -> dict[int, list[Command]]:
        """Mount every slot; returns the commands of each, keyed by slot index."""
        return {i: slot.mount() for i, slot in enumerate(self.slots)}

    async def wait(self) -> None:
        for slot in self.slots:
            await slot.wait()

    def close(self) -> None:
        for slot in self.slots:
            slot.close()


class GridController:
    """
    Owns the ordered categories of the grid.

    Categories are keyed 0..n-1. Resizing keeps the instance (and every
    slot state) of each surviving key, appends new categories on growth
    and closes the removed tail on shrink.
    """

    def __init__(self, slot_factory: SlotFactory, layout: GridLayout | None = None):
        self.slot_factory = slot_factory
        self.layout = layout or GridLayout()
        self._categories: list[Category] = []

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def category_ids(self) -> list[int]:
        return [c.category_id for c in self._categories]

    def __len__(self) -> int:
        return len(self._categories)

    def category(self, category_id: int) -> Category:
        if not 0 <= category_id < len(self._categories):
            raise KeyError(f"Unknown category: {category_id}")
        return self._categories[category_id]

    def set_category_count(self, raw) -> list[Category]:
        """
        Resize to the count typed by the user.

        Anything that is not a non-negative integer resizes to 0.

        Returns:
            The categories created by this call (to be mounted).
        """
        count = parse_category_count(raw)
        current = len(self._categories)

        if count < current:
            removed = self._categories[count:]
            del self._categories[count:]
            for category in removed:
                category.close()
            logger.debug(f"Grid shrunk {current} -> {count}")
            return []

        created = [
            Category(category_id, self.slot_factory, self.layout)
            for category_id in range(current, count)
        ]
        self._categories.extend(created)
        if created:
            logger.debug(f"Grid grew {current} -> {count}")
        return created

    async def wait(self) -> None:
        """Wait for every in-flight lookup in the grid."""
        for category in list(self._categories):
            await category.wait()

    def close(self) -> None:
        self.set_category_count(0)
