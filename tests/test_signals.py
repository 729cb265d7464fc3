import signal

import pytest

from structkit.signals import register


@pytest.fixture
def restore_sigint():
    original = signal.getsignal(signal.SIGINT)
    yield
    signal.signal(signal.SIGINT, original)


def test_registered_handler_receives_signal(restore_sigint):
    received = []
    register(signal.SIGINT, lambda signum, frame: received.append(signum))
    signal.raise_signal(signal.SIGINT)
    assert received == [signal.SIGINT]


def test_register_returns_previous_handler(restore_sigint):
    def first(signum, frame):
        pass

    def second(signum, frame):
        pass

    register(signal.SIGINT, first)
    assert register(signal.SIGINT, second) is first
    assert signal.getsignal(signal.SIGINT) is second


def test_register_accepts_ignore(restore_sigint):
    register(signal.SIGINT, signal.SIG_IGN)
    assert signal.getsignal(signal.SIGINT) == signal.SIG_IGN


def test_register_invalid_signal_raises():
    with pytest.raises(ValueError):
        register(-1, lambda signum, frame: None)