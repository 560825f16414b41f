"""
Change notification: observers register interest in an address and are called when data under it changes.
Observers get the changed URI only and are expected to query again.
"""

from __future__ import annotations

import logging
from typing import Callable

from .contract import Address, Collection, Item

log = logging.getLogger(__name__)

ChangeObserver = Callable[[str], None]


class ChangeNotifier:
    """
    Observer registry keyed by address.
    A change on Item(n) reaches observers of Item(n) and of Collection; a change on Collection
    reaches every observer, since any single tool may be affected.
    """

    def __init__(self) -> None:
        self._observers: dict[Address, list[ChangeObserver]] = {}

    def register(self, address: Address, observer: ChangeObserver) -> Callable[[], None]:
        """Register observer for address. Returns a function that unregisters it."""
        self._observers.setdefault(address, []).append(observer)

        def unregister() -> None:
            self.unregister(address, observer)

        return unregister

    def unregister(self, address: Address, observer: ChangeObserver) -> None:
        observers = self._observers.get(address)
        if not observers:
            return
        try:
            observers.remove(observer)
        except ValueError:
            return
        if not observers:
            del self._observers[address]

    def observer_count(self, address: Address | None = None) -> int:
        if address is not None:
            return len(self._observers.get(address, []))
        return sum(len(obs) for obs in self._observers.values())

    def _targets(self, address: Address) -> list[ChangeObserver]:
        if isinstance(address, Item):
            keys: list[Address] = [address, Collection()]
        else:
            keys = [Collection()] + [k for k in self._observers if isinstance(k, Item)]
        out: list[ChangeObserver] = []
        for key in keys:
            out.extend(self._observers.get(key, []))
        return out

    def notify_change(self, address: Address, uri: str) -> None:
        """Call every observer interested in address with the changed uri."""
        targets = self._targets(address)
        log.debug(f"Change on {uri}: notifying {len(targets)} observer(s)")
        for observer in targets:
            observer(uri)
