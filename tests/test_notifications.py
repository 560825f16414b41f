"""Unit tests for the change notifier."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tool_inventory.db.contract import Collection, Item
from tool_inventory.db.notifications import ChangeNotifier


def test_item_change_reaches_item_and_collection_observers() -> None:
    notifier = ChangeNotifier()
    seen = []
    notifier.register(Collection(), lambda uri: seen.append(("list", uri)))
    notifier.register(Item(1), lambda uri: seen.append(("one", uri)))
    notifier.register(Item(2), lambda uri: seen.append(("two", uri)))
    notifier.notify_change(Item(1), "tools/1")
    assert sorted(seen) == [("list", "tools/1"), ("one", "tools/1")]


def test_collection_change_reaches_every_observer() -> None:
    notifier = ChangeNotifier()
    seen = []
    notifier.register(Collection(), seen.append)
    notifier.register(Item(1), seen.append)
    notifier.register(Item(2), seen.append)
    notifier.notify_change(Collection(), "tools")
    assert seen == ["tools", "tools", "tools"]


def test_unregister() -> None:
    notifier = ChangeNotifier()
    seen = []
    unregister = notifier.register(Item(3), seen.append)
    assert notifier.observer_count(Item(3)) == 1
    unregister()
    unregister()
    assert notifier.observer_count() == 0
    notifier.notify_change(Item(3), "tools/3")
    assert seen == []


def test_observer_may_unregister_while_notified() -> None:
    notifier = ChangeNotifier()
    calls = []

    def once(uri: str) -> None:
        calls.append(uri)
        notifier.unregister(Collection(), once)

    notifier.register(Collection(), once)
    notifier.register(Collection(), calls.append)
    notifier.notify_change(Collection(), "tools")
    notifier.notify_change(Collection(), "tools")
    assert calls == ["tools", "tools", "tools"]
