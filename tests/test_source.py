import pytest

from ampcommon.schema.source import GitReference

REPO = "https://github.com/amphitheatre-app/amphitheatre.git"


def test_uri_of_bare_repo_is_repo():
    assert GitReference(repo=REPO).uri() == REPO


def test_uri_with_tag_and_path():
    ref = GitReference(repo=REPO, tag="v1.0", path="getting-started/.amp.toml")
    assert ref.uri() == "https://github.com/amphitheatre-app/amphitheatre.git#v1.0:getting-started/.amp.toml"


def test_uri_with_branch_only():
    ref = GitReference(repo=REPO, branch="main")
    assert ref.uri() == f"{REPO}#main"


def test_uri_with_path_only_keeps_separator():
    ref = GitReference(repo=REPO, path="app/.amp.toml")
    assert ref.uri() == f"{REPO}#:app/.amp.toml"


def test_reference_prefers_branch_then_tag_then_rev():
    assert GitReference(repo=REPO, branch="main", tag="v1", rev="abc").reference() == "main"
    assert GitReference(repo=REPO, tag="v1", rev="abc").reference() == "v1"
    assert GitReference(repo=REPO, rev="abc").reference() == "abc"
    assert GitReference(repo=REPO).reference() is None


def test_revision_defaults_to_placeholder():
    assert GitReference(repo=REPO).revision() == "Unknown-Revision-Hash"
    assert GitReference(repo=REPO, rev="4c59b707").revision() == "4c59b707"


def test_to_dict_skips_missing_fields():
    assert GitReference(repo=REPO, tag="v1").to_dict() == {"repo": REPO, "tag": "v1"}


def test_round_trip():
    ref = GitReference(repo=REPO, branch="main", rev="refs/pull/493/head", path="x/.amp.toml")
    assert GitReference.from_dict(ref.to_dict()) == ref


def test_from_dict_ignores_unknown_keys():
    assert GitReference.from_dict({"repo": REPO, "extra": 1}) == GitReference(repo=REPO)


def test_from_dict_requires_repo():
    with pytest.raises(ValueError):
        GitReference.from_dict({"branch": "main"})


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        GitReference.from_dict({"repo": REPO, "tag": 3})
    with pytest.raises(ValueError):
        GitReference.from_dict([REPO])