from __future__ import annotations

import threading

from src.time_clock.time_clock.common.locks import UserLocks


def test_entry_exists_only_while_held():
    locks = UserLocks()

    with locks.hold("123"):
        assert len(locks) == 1
        with locks.hold("456"):
            assert len(locks) == 2
        assert len(locks) == 1

    assert len(locks) == 0


def test_entry_is_released_when_body_raises():
    locks = UserLocks()

    try:
        with locks.hold("123"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert len(locks) == 0


def test_waiter_keeps_entry_until_it_is_done():
    locks = UserLocks()
    entered = threading.Event()
    order: list[str] = []

    def waiter():
        entered.set()
        with locks.hold("123"):
            order.append("waiter")

    with locks.hold("123"):
        t = threading.Thread(target=waiter)
        t.start()
        entered.wait(timeout=2)
        order.append("holder")
    t.join(timeout=5)

    assert order == ["holder", "waiter"]
    assert len(locks) == 0
