from macos_tweaks.core.status import ERROR_SECONDS, STATUS_SECONDS, StatusLine


def test_message_expires_after_deadline(clock):
    status = StatusLine(clock)
    status.show("Saved")

    clock.value = STATUS_SECONDS - 0.1
    status.tick()
    assert status.message == "Saved"

    clock.value = STATUS_SECONDS
    status.tick()
    assert status.message is None


def test_errors_stay_longer(clock):
    status = StatusLine(clock)
    status.error("Boom")
    clock.value = STATUS_SECONDS + 1
    status.tick()
    assert status.message == "Boom"
    clock.value = ERROR_SECONDS
    status.tick()
    assert status.message is None


def test_new_message_replaces_and_restarts(clock):
    status = StatusLine(clock)
    status.show("first")
    clock.value = 4.0
    status.show("second")
    clock.value = 8.0
    status.tick()
    assert status.message == "second"


def test_tick_count_does_not_matter(clock):
    status = StatusLine(clock)
    status.show("steady")
    for _ in range(1000):
        status.tick()
    assert status.message == "steady"
