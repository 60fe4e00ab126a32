"""View nodes: the addressable tree built by synthesis and driven by interactions.

A small document model:
- Nodes carry a tag, an id, an ordered class list, attributes, text and children
- Listeners are registered per event type and events bubble to the root
- Simple selectors (``tag``, ``#id``, ``.class``, ``[attr]`` and combinations
  of these without whitespace) are supported for lookups
"""

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], None]

FOCUSABLE_TAGS = frozenset({"a", "button", "input", "select", "textarea", "video"})

_SELECTOR_RE = re.compile(
    r"^(?P<tag>[a-zA-Z][\w-]*)?(?P<id>#[\w-]+)?(?P<classes>(?:\.[\w-]+)*)(?P<attr>\[[\w-]+\])?$"
)


class Event:
    """A dispatched event. ``target`` is where it started, ``current_target`` where it is now."""

    def __init__(self, type: str, target: "Node", key: str | None = None) -> None:
        self.type = type
        self.target = target
        self.key = key
        self.current_target: Node | None = None
        self.default_prevented = False
        self.propagation_stopped = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True

    def __repr__(self) -> str:
        return f"Event({self.type!r}, target={self.target!r}, key={self.key!r})"


@lru_cache(maxsize=256)
def _parse_selector(selector: str) -> tuple[str | None, str | None, tuple[str, ...], str | None]:
    m = _SELECTOR_RE.match(selector.strip())
    if not m or not selector.strip():
        raise ValueError(f"Unsupported selector: {selector!r}")
    tag = m.group("tag")
    node_id = m.group("id")[1:] if m.group("id") else None
    classes = tuple(c for c in m.group("classes").split(".") if c)
    attr = m.group("attr")[1:-1] if m.group("attr") else None
    return tag, node_id, classes, attr


class Node:
    """One element of the view tree."""

    def __init__(
        self,
        tag: str,
        *,
        id: str | None = None,
        cls: str | Iterable[str] | None = None,
        text: str = "",
        attrs: dict[str, Any] | None = None,
        children: Iterable["Node"] | None = None,
    ) -> None:
        self.tag = tag
        self.id = id
        if isinstance(cls, str):
            cls = cls.split()
        self.classes: list[str] = []
        for c in cls or ():
            self.add_class(c)
        self.text = text
        self.attrs: dict[str, Any] = dict(attrs or {})
        self.hidden = False
        self.parent: Node | None = None
        self.children: list[Node] = []
        self._listeners: dict[str, list[Listener]] = {}
        for child in children or ():
            self.append(child)

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.classes)
        return f"<{self.tag}{ident}{classes}>"

    # --- Tree ---

    def append(self, child: "Node") -> "Node":
        """Attach ``child`` as the last child and return it."""
        if child.parent is not None:
            child.remove()
        child.parent = self
        self.children.append(child)
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    def clear(self) -> None:
        """Drop all children and text."""
        for child in list(self.children):
            child.remove()
        self.text = ""

    @property
    def root(self) -> "Node":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def ancestors(self) -> Iterator["Node"]:
        """Yield this node, then each parent up to the root."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent

    def iter(self) -> Iterator["Node"]:
        """Pre-order walk including this node."""
        yield self
        for child in self.children:
            yield from child.iter()

    def clone(self, deep: bool = True) -> "Node":
        """Copy this node (and its subtree when ``deep``). Listeners are not copied."""
        copy = Node(self.tag, id=self.id, cls=self.classes, text=self.text, attrs=self.attrs)
        copy.hidden = self.hidden
        if deep:
            for child in self.children:
                copy.append(child.clone(deep=True))
        return copy

    @property
    def text_content(self) -> str:
        return self.text + "".join(c.text_content for c in self.children)

    # --- Classes and attributes ---

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def toggle_class(self, name: str, force: bool | None = None) -> bool:
        """Toggle ``name``; with ``force`` set it on (True) or off (False). Returns presence."""
        present = (not self.has_class(name)) if force is None else force
        if present:
            self.add_class(name)
        else:
            self.remove_class(name)
        return present

    def get(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.attrs[name] = value

    @property
    def focusable(self) -> bool:
        return self.tag in FOCUSABLE_TAGS or "tabindex" in self.attrs

    # --- Selectors ---

    def matches(self, selector: str) -> bool:
        tag, node_id, classes, attr = _parse_selector(selector)
        if tag is not None and self.tag != tag:
            return False
        if node_id is not None and self.id != node_id:
            return False
        if any(c not in self.classes for c in classes):
            return False
        if attr is not None and attr not in self.attrs:
            return False
        return True

    def select(self, selector: str) -> list["Node"]:
        """All descendants (excluding this node) matching ``selector``, in document order."""
        return [n for n in self.iter() if n is not self and n.matches(selector)]

    def select_one(self, selector: str) -> "Node | None":
        for n in self.iter():
            if n is not self and n.matches(selector):
                return n
        return None

    def closest(self, selector: str) -> "Node | None":
        """Nearest node, starting with this one, that matches ``selector``."""
        for node in self.ancestors():
            if node.matches(selector):
                return node
        return None

    def get_by_id(self, node_id: str) -> "Node | None":
        for n in self.iter():
            if n.id == node_id:
                return n
        return None

    # --- Events ---

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event: Event) -> bool:
        """Deliver ``event`` here and bubble it to the root.

        Returns False if a listener called ``prevent_default``.
        """
        for node in self.ancestors():
            event.current_target = node
            for listener in list(node._listeners.get(event.type, [])):
                listener(event)
            if event.propagation_stopped:
                break
        event.current_target = None
        return not event.default_prevented
