import pytest

from bonzai.kimono.work import work_off, work_on


@pytest.fixture
def repo(tmp_path, monkeypatch):
    top = tmp_path.resolve()
    (top / ".git").mkdir()
    (top / "sub").mkdir()
    (top / "vendor").mkdir()
    for d in (top, top / "sub", top / "vendor"):
        (d / "go.work").write_text("go 1.23\n")
    monkeypatch.chdir(top / "sub")
    return top


def test_work_off_renames_outside_vendor(repo):
    changed = work_off()
    assert sorted(changed) == sorted([str(repo), str(repo / "sub")])
    assert (repo / "go.work.off").exists()
    assert not (repo / "go.work").exists()
    assert (repo / "sub" / "go.work.off").exists()
    assert (repo / "vendor" / "go.work").exists()


def test_work_on_restores(repo):
    work_off()
    changed = work_on()
    assert sorted(changed) == sorted([str(repo), str(repo / "sub")])
    assert (repo / "go.work").read_text() == "go 1.23\n"
    assert not (repo / "sub" / "go.work.off").exists()


def test_work_on_when_already_on_changes_nothing(repo):
    assert work_on() == []
    assert (repo / "go.work").exists()


def test_work_outside_repo_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        work_off()