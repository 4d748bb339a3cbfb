from pathlib import Path

import pytest

from python_config import (
    Interpreter,
    ParseFailure,
    PathEncodingFailure,
    ProcessLaunchFailure,
    SemanticVersion,
    StaticCommand,
    Version,
)
from python_config import resolver


def factory(version_output: str):
    return lambda program: StaticCommand({"--version": version_output}, program=program)


def test_from_version():
    assert resolver.from_version(Version.Three) == Interpreter("python3", Version.Three)
    assert resolver.from_version(Version.Two) == Interpreter("python2", Version.Two)


def test_from_path_python3():
    info = resolver.from_path("/usr/bin/python3.7", factory("Python 3.7.2\n"))
    assert info == Interpreter("/usr/bin/python3.7", Version.Three)


def test_from_path_python2():
    info = resolver.from_path(Path("/usr/bin/python2"), factory("Python 2.7.16"))
    assert info == Interpreter("/usr/bin/python2", Version.Two)


def test_from_path_bytes():
    info = resolver.from_path(b"/usr/bin/python3", factory("Python 3.8.0"))
    assert info.program == "/usr/bin/python3"


def test_from_path_undecodable_bytes():
    with pytest.raises(PathEncodingFailure):
        resolver.from_path(b"/usr/bin/\xffpython", factory("Python 3.8.0"))


def test_from_path_surrogates():
    with pytest.raises(PathEncodingFailure):
        resolver.from_path("/usr/bin/\udcffpython", factory("Python 3.8.0"))


def test_from_path_unparseable_version():
    with pytest.raises(ParseFailure):
        resolver.from_path("/usr/bin/python", factory(""))


def test_from_path_launch_failure(tmp_path):
    with pytest.raises(ProcessLaunchFailure):
        resolver.from_path(tmp_path / "missing-python")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Python 3.7.2", SemanticVersion(3, 7, 2)),
        ("Python 3.12.0-rc1", SemanticVersion(3, 12, 0, pre="rc1")),
        ("PyPy 3.9.18 extra", SemanticVersion(3, 9, 18)),
    ],
)
def test_parse_version(raw, expected):
    assert resolver.parse_version(raw) == expected


@pytest.mark.parametrize("raw", ["", "Python", "Python 3.7", "Python 3.07.1", "Python 3.12.0rc1"])
def test_parse_version_failure(raw):
    with pytest.raises(ParseFailure):
        resolver.parse_version(raw)


def test_semantic_version_str():
    assert str(SemanticVersion(3, 7, 2, pre="b1", build="abc")) == "3.7.2-b1+abc"
