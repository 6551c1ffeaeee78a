import os
import stat

from pipex.paths import find_command, get_paths, split_words


def _make(path, executable=True):
    path.write_text("#!/bin/sh\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)
    return path


def test_split_words_drops_empty_fields():
    assert split_words("ls  -l   -a", " ") == ["ls", "-l", "-a"]


def test_split_words_empty_and_separators_only():
    assert split_words("", ":") == []
    assert split_words(":::", ":") == []


def test_get_paths_from_list():
    assert get_paths(["HOME=/home/u", "PATH=/a:/b"]) == ["/a/", "/b/"]


def test_get_paths_from_mapping():
    assert get_paths({"HOME": "/home/u", "PATH": "/opt/bin"}) == ["/opt/bin/"]


def test_get_paths_default():
    assert get_paths([]) == [
        "/usr/local/bin/",
        "/usr/bin/",
        "/bin/",
        "/usr/sbin/",
        "/sbin/",
    ]


def test_get_paths_first_match_wins():
    assert get_paths(["PATH=/first", "PATH=/second"]) == ["/first/"]


def test_get_paths_empty_value():
    assert get_paths(["PATH="]) == []


def test_every_path_ends_with_slash():
    paths = get_paths(["PATH=/x::/y/z:/w"])
    assert paths
    assert all(p.endswith("/") for p in paths)


def test_find_command_executable(tmp_path):
    tool = _make(tmp_path / "tool")
    assert find_command([str(tmp_path) + "/"], "tool") == str(tool)


def test_find_command_not_executable(tmp_path):
    _make(tmp_path / "tool", executable=False)
    assert find_command([str(tmp_path) + "/"], "tool") is None


def test_find_command_missing(tmp_path):
    assert find_command([str(tmp_path) + "/"], "absent") is None
    assert find_command([], "anything") is None


def test_find_command_order(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make(second / "tool")
    found_second = _make(first / "tool")
    dirs = [str(first) + "/", str(second) + "/"]
    assert find_command(dirs, "tool") == str(found_second)