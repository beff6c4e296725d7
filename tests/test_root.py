import pytest

from limitvfs import root
from limitvfs.paths import LIMIT_SCHEME, path_from_location


@pytest.fixture(autouse=True)
def clean_root():
    root.reset_root_dir()
    yield
    root.reset_root_dir()


def test_root_unset_by_default():
    assert root.get_root_path() == ""


def test_set_root_appends_slash():
    root.set_root_dir("/usr/local")
    assert root.get_root_path() == "/usr/local/"


def test_set_root_keeps_existing_slash():
    root.set_root_dir("/srv/data/")
    assert root.get_root_path() == "/srv/data/"


def test_set_root_replaces_previous():
    root.set_root_dir("/first")
    root.set_root_dir("/second")
    assert root.get_root_path() == "/second/"


def test_reset_clears_root():
    root.set_root_dir("/usr/local")
    root.reset_root_dir()
    assert root.get_root_path() == ""


def test_empty_root_rejected():
    with pytest.raises(ValueError):
        root.set_root_dir("")
    assert root.get_root_path() == ""


def test_too_long_root_rejected():
    with pytest.raises(ValueError):
        root.set_root_dir("/" + "a" * 5000)


def test_root_uri():
    assert root.get_root_uri() == "andsec-yun:///"


def test_root_uri_names_root_path():
    uri = root.get_root_uri()
    assert uri.startswith(LIMIT_SCHEME)
    assert path_from_location(uri) == "/"