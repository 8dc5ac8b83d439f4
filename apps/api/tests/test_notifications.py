from prague_flats.services.notifications import NotificationCenter


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_notifications_dismiss_after_ttl() -> None:
    clock = FakeClock()
    center = NotificationCenter(ttl_seconds=5, clock=clock)

    center.push("Failed to load properties. Please try again later.")
    clock.now += 2
    active = center.active()

    assert len(active) == 1
    assert active[0].level == "error"
    assert active[0].dismiss_after_seconds == 3

    clock.now += 3
    assert center.active() == []
    assert len(center) == 0


def test_clear_drops_everything() -> None:
    center = NotificationCenter(ttl_seconds=5, clock=FakeClock())
    center.push("one")
    center.push("two", level="info")

    assert [note.message for note in center.active()] == ["one", "two"]

    center.clear()
    assert len(center) == 0
