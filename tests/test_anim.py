import signal

import pytest

from bonzai import anim


@pytest.fixture(autouse=True)
def restore_signals():
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTERM)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_setup_output(capsys):
    anim.simple_animation_screen()
    out = capsys.readouterr().out
    assert out == anim.CURSOR_OFF + anim.ALT_BUF_ON
    assert out == "\033[?25l\033[?1049h"


def test_interrupt_restores_and_exits(capsys):
    anim.simple_animation_screen()
    capsys.readouterr()
    handler = signal.getsignal(signal.SIGINT)
    with pytest.raises(SystemExit) as exc:
        handler(signal.SIGINT, None)
    assert exc.value.code == 0
    assert capsys.readouterr().out == anim.CLEAR + anim.ALT_BUF_OFF + anim.CURSOR_ON


def test_terminate_restores_and_exits(capsys):
    anim.simple_animation_screen()
    capsys.readouterr()
    handler = signal.getsignal(signal.SIGTERM)
    with pytest.raises(SystemExit) as exc:
        handler(signal.SIGTERM, None)
    assert exc.value.code == 0
    assert capsys.readouterr().out == anim.CLEAR + anim.ALT_BUF_OFF + anim.CURSOR_ON