import itertools
import signal
import sys
from unittest.mock import patch

import pytest

from bonzai import anim
from bonzai.sunrise import colors, main, sunrise


class _Stop(Exception):
    pass


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTERM)}
    monkeypatch.delenv("COMP_LINE", raising=False)
    monkeypatch.setattr(sys, "argv", ["sunrise"])
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_colors_in_range():
    for rgb in itertools.islice(colors(0.04), 500):
        assert all(0 < c <= 255 for c in rgb)


def test_colors_zero_step_is_constant():
    first, second = itertools.islice(colors(0), 2)
    assert first == second
    assert first[0] == 128


def test_colors_change_with_step():
    a, b = itertools.islice(colors(0.5), 2)
    assert a != b


def test_sunrise_prints_colour_lines(capsys):
    with patch("time.sleep", side_effect=[None, None, _Stop()]) as sleep:
        with pytest.raises(_Stop):
            sunrise(0.25)
    assert sleep.call_count == 3
    sleep.assert_called_with(0.25)
    out = capsys.readouterr().out
    prefix = anim.CURSOR_OFF + anim.ALT_BUF_ON
    assert out.startswith(prefix)
    lines = out[len(prefix):].split("\n")[:3]
    expected = [
        f"\033[48;2;{r};{g};{b}m" for r, g, b in itertools.islice(colors(), 3)
    ]
    assert lines == expected


def test_main_speed_argument():
    with patch("time.sleep", side_effect=_Stop()) as sleep:
        with pytest.raises(SystemExit) as exc:
            main(["5"])
    sleep.assert_called_once_with(0.005)
    assert exc.value.code == 1


def test_main_default_speed():
    with patch("time.sleep", side_effect=_Stop()) as sleep:
        with pytest.raises(SystemExit):
            main([])
    sleep.assert_called_once_with(0.01)


def test_main_bad_number_means_zero():
    with patch("time.sleep", side_effect=_Stop()) as sleep:
        with pytest.raises(SystemExit):
            main(["abc"])
    sleep.assert_called_once_with(0)


def test_main_too_many_args(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["1", "2"])
    assert exc.value.code == 1
    assert "2 is too many arguments, 1 maximum" in capsys.readouterr().err