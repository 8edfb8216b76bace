import pytest

from ampcommon.scm.errors import InvalidHostname, InvalidRepoAddress, SCMError, UnknownDriver


def test_invalid_repo_address_message():
    err = InvalidRepoAddress("not a url")
    assert str(err) == "InvalidRepoAddress: not a url"
    assert err.address == "not a url"


def test_unknown_driver_message():
    err = UnknownDriver("svn")
    assert str(err) == "UnknownDriver: svn"
    assert err.name == "svn"


def test_invalid_hostname_message():
    assert str(InvalidHostname()) == "InvalidHostname"


@pytest.mark.parametrize(
    "error", [InvalidRepoAddress("x"), UnknownDriver("y"), InvalidHostname()]
)
def test_all_caught_as_scm_error(error):
    with pytest.raises(SCMError) as info:
        raise error
    assert info.value is error