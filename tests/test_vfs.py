import pytest

from limitvfs.file import LimitFile, new_for_path
from limitvfs.paths import LIMIT_SCHEME
from limitvfs.vfs import Vfs, get_default_vfs, register_limit_scheme


def _fake_lookup(uri):
    return new_for_path("/looked-up")


def test_register_then_lookup_uses_callback():
    vfs = Vfs()
    assert vfs.register_uri_scheme("demo", _fake_lookup) is True
    assert vfs.file_for_uri("demo://anything") == new_for_path("/looked-up")


def test_lookup_receives_full_uri():
    seen = []

    def lookup(uri):
        seen.append(uri)
        return new_for_path("/x")

    vfs = Vfs()
    vfs.register_uri_scheme("demo", lookup)
    found = vfs.file_for_uri("demo://some/where")
    assert found == new_for_path("/x")
    assert seen == ["demo://some/where"]


def test_duplicate_registration_is_refused():
    vfs = Vfs()
    assert vfs.register_uri_scheme("demo", _fake_lookup) is True
    assert vfs.register_uri_scheme("demo", _fake_lookup) is False
    assert vfs.supported_uri_schemes == ("demo",)


def test_scheme_matching_ignores_case():
    vfs = Vfs()
    vfs.register_uri_scheme("Demo", _fake_lookup)
    assert vfs.file_for_uri("DEMO://a") == new_for_path("/looked-up")


def test_unknown_scheme_raises():
    vfs = Vfs()
    with pytest.raises(ValueError):
        vfs.file_for_uri("other://a")


@pytest.mark.parametrize("uri", ["no-scheme-here", ":///path"])
def test_uri_without_scheme_raises(uri):
    vfs = Vfs()
    vfs.register_uri_scheme("demo", _fake_lookup)
    with pytest.raises(ValueError):
        vfs.file_for_uri(uri)


def test_empty_scheme_cannot_be_registered():
    with pytest.raises(ValueError):
        Vfs().register_uri_scheme("", _fake_lookup)


def test_default_vfs_keeps_registrations_between_calls():
    first = get_default_vfs()
    register_limit_scheme()
    assert LIMIT_SCHEME in first.supported_uri_schemes
    second = get_default_vfs()
    assert LIMIT_SCHEME in second.supported_uri_schemes
    assert second.file_for_uri(f"{LIMIT_SCHEME}:///a") == new_for_path("/a")


def test_register_limit_scheme_is_idempotent():
    register_limit_scheme()
    register_limit_scheme()
    schemes = get_default_vfs().supported_uri_schemes
    assert schemes.count(LIMIT_SCHEME) == 1


def test_limit_uri_resolves_through_default_vfs():
    register_limit_scheme()
    found = get_default_vfs().file_for_uri(f"{LIMIT_SCHEME}:///usr//lib/")
    assert isinstance(found, LimitFile)
    assert found == new_for_path("/usr/lib")


def test_bad_limit_uri_is_rejected_by_lookup():
    register_limit_scheme()
    with pytest.raises(ValueError):
        get_default_vfs().file_for_uri(f"{LIMIT_SCHEME}://")