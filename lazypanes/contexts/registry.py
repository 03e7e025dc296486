"""
Context registry.

Tracks which context owns each panel's surface and which single context is
focused. Switching context is the only way focus changes; hiding or showing
a surface only changes the stacking order.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Protocol

from ..exceptions import ContextUnavailableError
from ..views.backend import RenderBackend
from ..views.panels import POPUP_PANELS
from .keys import LIST_CONTEXTS, ContextKey

logger = logging.getLogger(__name__)


class ListProvider(Protocol):
    """Read contract of a list's content producer.

    ``selected_line`` is -1 when nothing is selected.
    """

    @property
    def selected_line(self) -> int:
        ...

    @property
    def item_count(self) -> int:
        ...

    def on_search_select(self, index: int) -> None:
        ...


@dataclass
class StaticListProvider:
    """List provider over a fixed list of item labels."""

    items: List[str] = field(default_factory=list)
    selected_line: int = 0
    selections: List[int] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def on_search_select(self, index: int) -> None:
        self.selected_line = index
        self.selections.append(index)


class FocusState(Enum):
    UNFOCUSED = "unfocused"
    FOCUSED = "focused"


@dataclass(eq=False)
class Context:
    """A context bound to its panel and, for lists, its content provider."""

    key: ContextKey
    provider: Optional[ListProvider] = None

    @property
    def panel(self) -> str:
        return self.key.panel

    @property
    def selected_line(self) -> int:
        return self.provider.selected_line if self.provider is not None else -1

    @property
    def item_count(self) -> int:
        return self.provider.item_count if self.provider is not None else 0

    def on_search_select(self, index: int) -> None:
        if self.provider is not None:
            self.provider.on_search_select(index)


class ContextTree:
    """One Context per ContextKey; list contexts without a provider get an empty one."""

    def __init__(self, providers: Optional[Mapping[ContextKey, ListProvider]] = None) -> None:
        providers = providers or {}
        self._contexts: Dict[ContextKey, Context] = {}
        for key in ContextKey:
            provider = providers.get(key)
            if provider is None and key.is_list:
                provider = StaticListProvider(selected_line=-1)
            self._contexts[key] = Context(key, provider)

    def __getitem__(self, key: ContextKey) -> Context:
        return self._contexts[key]

    def __iter__(self) -> Iterator[Context]:
        return iter(self._contexts.values())

    def list_contexts(self) -> List[Context]:
        return [self._contexts[key] for key in LIST_CONTEXTS]


class ContextRegistry:
    """Ownership map (panel -> owning context) plus the focus pointer."""

    def __init__(self, backend: RenderBackend) -> None:
        self.backend = backend
        self.tree: Optional[ContextTree] = None
        self._owners: Dict[str, ContextKey] = {}
        self._focused: Optional[ContextKey] = None

    def build_tree(self, providers: Optional[Mapping[ContextKey, ListProvider]] = None) -> ContextTree:
        """Create the context tree and give every panel its default owner."""
        self.tree = ContextTree(providers)
        self._owners = {}
        for key in ContextKey:
            self._owners.setdefault(key.panel, key)
        logger.debug("Context tree built with %d contexts", len(ContextKey))
        return self.tree

    @property
    def focused(self) -> Optional[Context]:
        if self._focused is None or self.tree is None:
            return None
        return self.tree[self._focused]

    def state_of(self, key: ContextKey) -> FocusState:
        return FocusState.FOCUSED if self._focused == key else FocusState.UNFOCUSED

    def owner(self, panel: str) -> Optional[ContextKey]:
        return self._owners.get(panel)

    def owns_surface(self, key: ContextKey) -> bool:
        return self._owners.get(key.panel) == key

    def switch_context(self, target: ContextKey) -> Context:
        """Focus ``target``, raising its surface and taking ownership of it.

        Raises:
            ContextUnavailableError: If the tree is not built yet or the
                target's surface does not exist yet. Retry after the next
                relayout pass.
        """
        panel = target.panel
        if self.tree is None or not self.backend.exists(panel):
            raise ContextUnavailableError(context_key=target.value, panel=panel)

        previous = self._focused
        if previous is not None and previous.panel != panel and self.backend.exists(previous.panel):
            if previous.panel in POPUP_PANELS:
                self.backend.hide(previous.panel)
            else:
                self.backend.lower_surface(previous.panel)

        self._focused = target
        self.show(panel)
        self._owners[panel] = target
        if target.tab_index is not None:
            self.backend.configure(panel, tab_index=target.tab_index)

        logger.info("Switched context %s -> %s", previous.value if previous else None, target.value)
        return self.tree[target]

    def hide(self, panel: str) -> None:
        self.backend.hide(panel)

    def show(self, panel: str) -> None:
        """Raise a surface; hidden popups are made visible where they are."""
        self.backend.raise_surface(panel)
        surface = self.backend.get(panel)
        if panel in POPUP_PANELS and surface.hidden:
            self.backend.set_bounds(panel, surface.bounds)
