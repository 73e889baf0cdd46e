import subprocess
import sys
from unittest import mock

import pytest

from bonzai.kimono import cli
from bonzai.kimono.cli import (
    TAG_PUSH_ENV,
    convert_value,
    is_truthy,
    main,
    opts_to_ver_part,
    state_var,
)
from bonzai.kimono.tag import VerPart, version_bump


@pytest.fixture
def repo(tmp_path, monkeypatch):
    top = tmp_path.resolve()
    (top / ".git").mkdir()
    (top / "go.mod").write_text("module example.com/root\n")
    monkeypatch.chdir(top)
    monkeypatch.delenv("COMP_LINE", raising=False)
    monkeypatch.setattr(sys, "argv", ["kimono"])
    for env in (cli.TAG_PUSH_ENV, cli.TAG_SHORTEN_ENV, cli.TAG_VERSION_PART_ENV):
        monkeypatch.delenv(env, raising=False)
    return top


def fake_git(tags_output, calls):
    def fake(cmd, **kwargs):
        cmd = list(cmd)
        calls.append(cmd)
        out = tags_output if cmd[:3] == ["git", "tag", "-l"] else ""
        return subprocess.CompletedProcess(cmd, 0, stdout=out, stderr="")

    return fake


@pytest.mark.parametrize(
    "text, expected",
    [
        ("t", True),
        ("TRUE", True),
        (" 5 ", True),
        ("f", False),
        ("False", False),
        ("0", False),
        ("-1", False),
        ("nope", False),
    ],
)
def test_is_truthy(text, expected):
    assert is_truthy(text) is expected


def test_convert_value_by_fallback_type():
    assert convert_value("42", 0) == 42
    assert convert_value("oops", 7) == 0
    assert convert_value("true", False) is True
    assert convert_value("minor", "patch") == "minor"


@pytest.mark.parametrize(
    "opt, part",
    [
        ("major", VerPart.MAJOR),
        ("M", VerPart.MAJOR),
        ("minor", VerPart.MINOR),
        ("m", VerPart.MINOR),
        ("patch", VerPart.PATCH),
        ("p", VerPart.PATCH),
        ("other", VerPart.MINOR),
    ],
)
def test_opts_to_ver_part(opt, part):
    assert opts_to_ver_part(opt) is part


def test_state_var_prefers_environment(monkeypatch):
    monkeypatch.setenv(TAG_PUSH_ENV, "1")
    monkeypatch.setitem(cli.STATE, "push-tags", "false")
    assert state_var("push-tags", TAG_PUSH_ENV, False) is True


def test_state_var_uses_stored_state(monkeypatch):
    monkeypatch.delenv(TAG_PUSH_ENV, raising=False)
    monkeypatch.setitem(cli.STATE, "push-tags", "t")
    assert state_var("push-tags", TAG_PUSH_ENV, False) is True


def test_state_var_falls_back(monkeypatch):
    monkeypatch.delenv(TAG_PUSH_ENV, raising=False)
    monkeypatch.delitem(cli.STATE, "push-tags", raising=False)
    assert state_var("push-tags", TAG_PUSH_ENV, "patch") == "patch"


def test_main_work_needs_argument(repo):
    with pytest.raises(SystemExit) as exc:
        main(["work"])
    assert exc.value.code == 1


def test_main_work_rejects_extra_arguments(repo):
    with pytest.raises(SystemExit) as exc:
        main(["work", "on", "off"])
    assert exc.value.code == 1


def test_main_work_on(repo):
    (repo / "go.work.off").write_text("go 1.23\n")
    with pytest.raises(SystemExit) as exc:
        main(["w", "on"])
    assert exc.value.code == 0
    assert (repo / "go.work").exists()


def test_main_tag_defaults_to_list(repo, capsys):
    calls = []
    with mock.patch("subprocess.run", side_effect=fake_git("v0.2.0\nv0.1.0", calls)):
        with pytest.raises(SystemExit) as exc:
            main(["tag"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.split() == ["v0.1.0", "v0.2.0"]


def test_main_tag_bump_minor(repo):
    calls = []
    with mock.patch("subprocess.run", side_effect=fake_git("v1.2.3", calls)):
        with pytest.raises(SystemExit) as exc:
            main(["tag", "bump", "minor"])
    assert exc.value.code == 0
    assert ["git", "tag", version_bump("v1.2.3", VerPart.MINOR)] in calls


def test_main_root_alone_is_uncallable(repo):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1