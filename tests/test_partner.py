import pytest

from ampcommon.schema.partner import (
    LocalPartner,
    RegisteredPartner,
    parse_partner,
    partner_to_dict,
)
from ampcommon.schema.source import GitReference

REPO = "https://github.com/amphitheatre-app/amphitheatre.git"


def test_parse_registered_partner():
    assert parse_partner({"version": "0.1.0"}) == RegisteredPartner(version="0.1.0")


def test_parse_registered_partner_with_registry():
    partner = parse_partner({"registry": "catalog", "version": "1.0"})
    assert partner == RegisteredPartner(version="1.0", registry="catalog")


def test_parse_repository_partner():
    partner = parse_partner({"repo": REPO, "branch": "main"})
    assert partner == GitReference(repo=REPO, branch="main")


def test_parse_local_partner():
    assert parse_partner({"path": "../backend"}) == LocalPartner(path="../backend")


def test_registry_form_wins_over_repository():
    partner = parse_partner({"version": "1.0", "repo": REPO})
    assert isinstance(partner, RegisteredPartner)
    assert partner.version == "1.0"


def test_repository_form_wins_over_local():
    partner = parse_partner({"repo": REPO, "path": "sub/.amp.toml"})
    assert partner == GitReference(repo=REPO, path="sub/.amp.toml")


def test_invalid_version_falls_through_to_local():
    assert parse_partner({"version": 1, "path": "here"}) == LocalPartner(path="here")


@pytest.mark.parametrize("data", [{}, {"other": "x"}, ["x"], "x"])
def test_parse_partner_rejects_unmatched(data):
    with pytest.raises(ValueError):
        parse_partner(data)


@pytest.mark.parametrize(
    "partner",
    [
        RegisteredPartner(version="2.0", registry="hub"),
        RegisteredPartner(version="2.0"),
        GitReference(repo=REPO, tag="v1.0"),
        LocalPartner(path="./local"),
    ],
)
def test_round_trip(partner):
    assert parse_partner(partner_to_dict(partner)) == partner


def test_registered_to_dict_skips_registry():
    assert RegisteredPartner(version="3").to_dict() == {"version": "3"}


def test_partner_to_dict_rejects_other_objects():
    with pytest.raises(TypeError):
        partner_to_dict(object())