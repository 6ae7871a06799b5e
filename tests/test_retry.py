import pytest

from bible_processing.retry import check_max_retries, retry_call


def flaky(failures):
    calls = []

    def action():
        calls.append(1)
        if len(calls) <= failures:
            raise RuntimeError(f"boom {len(calls)}")

    return action, calls


def test_succeeds_first_time_without_sleeping(fake_sleep, sleeps):
    action, calls = flaky(0)
    assert retry_call(action, max_retries=3, base_delay=1.0, sleep=fake_sleep)
    assert len(calls) == 1
    assert sleeps == []


def test_succeeds_on_last_attempt(fake_sleep, sleeps):
    action, calls = flaky(2)
    assert retry_call(action, max_retries=3, base_delay=1.0, sleep=fake_sleep)
    assert len(calls) == 3
    assert sleeps == [1.0, 2.0]


def test_gives_up_after_max_attempts(fake_sleep, sleeps, capsys):
    action, calls = flaky(100)
    assert retry_call(action, max_retries=4, base_delay=0.5, sleep=fake_sleep) is False
    assert len(calls) == 4
    # no pause after the final attempt
    assert sleeps == [0.5, 1.0, 1.5]
    out = capsys.readouterr().out
    assert "Attempt 1/4 failed: boom 1" in out
    assert "Attempt 4/4 failed: boom 4" in out


def test_single_attempt(fake_sleep, sleeps):
    action, calls = flaky(1)
    assert retry_call(action, max_retries=1, sleep=fake_sleep) is False
    assert len(calls) == 1
    assert sleeps == []


def test_rejects_zero_attempts():
    with pytest.raises(ValueError):
        retry_call(lambda: None, max_retries=0)


def test_keyboard_interrupt_propagates(fake_sleep):
    def action():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        retry_call(action, max_retries=3, sleep=fake_sleep)


def test_check_max_retries():
    check_max_retries(1)
    with pytest.raises(ValueError, match="at least 1"):
        check_max_retries(0)
