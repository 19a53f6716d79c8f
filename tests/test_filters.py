import pytest

from treedump.core.filters import (
    file_extension, is_allowed_file, is_excluded_folder, is_hidden, is_visible,
)
from treedump.core.model import Configuration, ExclusionMode


def cfg(exts=(), excl=(), mode=ExclusionMode.SUBSTRING):
    return Configuration("/tmp/x", exts, excl, mode)


@pytest.mark.parametrize("name,ext", [
    ("a.py", "py"),
    ("archive.tar.gz", "gz"),
    ("Makefile", ""),
    ("trailing.", ""),
    ("A.PY", "PY"),
])
def test_file_extension(name, ext):
    assert file_extension(name) == ext


def test_empty_allow_list_allows_everything():
    assert is_allowed_file("a.py", cfg())
    assert is_allowed_file("Makefile", cfg())


def test_allow_list_is_exact_and_case_sensitive():
    c = cfg(exts=["py", "md"])
    assert is_allowed_file("a.py", c)
    assert not is_allowed_file("a.PY", c)
    assert not is_allowed_file("a.pyc", c)
    assert not is_allowed_file("Makefile", c)


def test_substring_exclusion_matches_anywhere():
    c = cfg(excl=["build"])
    assert is_excluded_folder("build", c)
    assert is_excluded_folder("src/build/out.txt", c)
    assert is_excluded_folder("rebuild.py", c)
    assert not is_excluded_folder("src/main.py", c)


def test_segment_exclusion_matches_whole_segments_only():
    c = cfg(excl=["build"], mode=ExclusionMode.SEGMENT)
    assert is_excluded_folder("build", c)
    assert is_excluded_folder("src/build/out.txt", c)
    assert not is_excluded_folder("rebuild.py", c)
    assert not is_excluded_folder("builder/x.py", c)


def test_empty_pattern_never_matches():
    assert not is_excluded_folder("anything/at/all", cfg(excl=[""]))


def test_is_hidden():
    assert is_hidden(".git")
    assert is_hidden(".env")
    assert not is_hidden("a.git")


def test_is_visible_combines_rules():
    c = cfg(exts=["py"], excl=["node_modules"])
    assert is_visible("src/a.py", False, c)
    assert not is_visible("src/a.txt", False, c)
    assert is_visible("src/a.txt", False, c, check_extension=False)
    assert is_visible("src", True, c)
    assert not is_visible("node_modules/x.py", False, c)
    assert not is_visible("src/.hidden.py", False, c)


def test_configuration_normalises_inputs(tmp_path):
    c = Configuration(str(tmp_path), ["py"], ["dist"], "segment")
    assert c.root == tmp_path
    assert c.allowed_extensions == ("py",)
    assert c.excluded_folders == ("dist",)
    assert c.exclusion_mode is ExclusionMode.SEGMENT
