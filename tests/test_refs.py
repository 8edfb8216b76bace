import pytest

from ampcommon.scm.refs import expand_ref, trim_ref


@pytest.mark.parametrize(
    "reference, expected",
    [
        ("refs/heads/main", "main"),
        ("refs/tags/v1.0", "v1.0"),
        ("main", "main"),
        ("refs/heads/refs/heads/x", "x"),
        ("refs/heads/refs/tags/v2", "v2"),
        ("refs/pull/493/head", "refs/pull/493/head"),
    ],
)
def test_trim_ref(reference, expected):
    assert trim_ref(reference) == expected


def test_expand_ref_adds_prefix():
    assert expand_ref("main", "refs/heads/") == "refs/heads/main"
    assert expand_ref("main", "refs/heads") == "refs/heads/main"
    assert expand_ref("main", "refs/heads//") == "refs/heads/main"


def test_expand_ref_keeps_qualified_names():
    assert expand_ref("refs/tags/v1.0", "refs/heads/") == "refs/tags/v1.0"


def test_trim_inverts_expand():
    for name in ("main", "feature/x", "v1.0"):
        assert trim_ref(expand_ref(name, "refs/heads/")) == name
        assert trim_ref(expand_ref(name, "refs/tags/")) == name