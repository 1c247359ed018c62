"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from razel.events import Event
from razel.timestep import Timestep


class Layer:
    """A unit of per-frame update, rendering and event handling.

    The default hooks keep simple bookkeeping that subclasses may extend.
    """

    def __init__(self, name: str = "Layer") -> None:
        self._name = name
        self._attached = False
        self._elapsed = 0.0
        self._events_seen = 0
        self._ui_frames = 0

    @property
    def name(self) -> str:
        """Debug name of the layer."""
        return self._name

    @property
    def attached(self) -> bool:
        """Whether the layer is currently on a stack."""
        return self._attached

    @property
    def elapsed(self) -> float:
        """Seconds accumulated through ``on_update``."""
        return self._elapsed

    @property
    def events_seen(self) -> int:
        """Number of events passed to ``on_event``."""
        return self._events_seen

    @property
    def ui_frames(self) -> int:
        """Number of calls to ``on_imgui_render``."""
        return self._ui_frames

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self._attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self._attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame."""
        self._elapsed += float(ts)

    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer."""
        self._events_seen += 1

    def on_imgui_render(self) -> None:
        """Called once per frame while the UI is drawn."""
        self._ui_frames += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class LayerStack:
    """Ordinary layers first, then overlays; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Add an ordinary layer above the other ordinary layers."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay on top of everything."""
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove an ordinary layer; overlays and unknown layers are ignored."""
        index = self._find(layer, 0, self._insert_index)
        if index is not None:
            layer.on_detach()
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay; ordinary and unknown layers are ignored."""
        index = self._find(overlay, self._insert_index, len(self._layers))
        if index is not None:
            overlay.on_detach()
            del self._layers[index]

    def _find(self, layer: Layer, start: int, stop: int) -> int | None:
        return next(
            (i for i in range(start, stop) if self._layers[i] is layer),
            None,
        )

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)