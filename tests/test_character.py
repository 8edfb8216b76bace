import pytest

from ampcommon.schema.build import BuildMethod
from ampcommon.schema.character import Character, Metadata
from ampcommon.schema.partner import LocalPartner, RegisteredPartner
from ampcommon.schema.source import GitReference

MANIFEST = """
name = "hello"
version = "0.1.0"
repository = "https://example.com/hello.git"
authors = ["Jane <jane@example.com>"]

[build]
dockerfile = "Dockerfile"

[deploy]
image = "hello:latest"

[[deploy.services]]
ports = [{ port = 8080, expose = true }]

[partners]
db = { version = "1.0" }
lib = { repo = "https://example.com/lib.git", branch = "main" }
local = { path = "../local" }
"""


def test_named_sets_only_the_name():
    character = Character.named("hello")
    assert character.meta.name == "hello"
    assert character.meta.repository == ""
    assert character.build is None
    assert character.partners is None


def test_loads_reads_metadata():
    character = Character.loads(MANIFEST)
    assert character.meta.name == "hello"
    assert character.meta.version == "0.1.0"
    assert character.meta.authors == ["Jane <jane@example.com>"]
    assert character.meta.repository == "https://example.com/hello.git"


def test_loads_reads_build_and_deploy():
    character = Character.loads(MANIFEST)
    assert character.build.method() is BuildMethod.DOCKERFILE
    assert character.deploy.image == "hello:latest"
    assert character.deploy.services[0].ports[0].port == 8080


def test_loads_parses_partner_variants():
    partners = Character.loads(MANIFEST).partners
    assert partners["db"] == RegisteredPartner(version="1.0")
    assert partners["lib"] == GitReference(repo="https://example.com/lib.git", branch="main")
    assert partners["local"] == LocalPartner(path="../local")


def test_load_from_file(tmp_path):
    path = tmp_path / "amp.toml"
    path.write_text(MANIFEST, encoding="utf-8")
    assert Character.load(path) == Character.loads(MANIFEST)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Character.load(tmp_path / "missing.toml")


def test_dict_round_trip():
    character = Character.loads(MANIFEST)
    assert Character.from_dict(character.to_dict()) == character


def test_to_dict_flattens_metadata_and_skips_none():
    data = Character.loads(MANIFEST).to_dict()
    assert data["name"] == "hello"
    assert "description" not in data
    assert "license" not in data


def test_missing_repository_rejected():
    with pytest.raises(ValueError):
        Character.loads('name = "hello"\n')


def test_invalid_toml_rejected():
    with pytest.raises(ValueError):
        Character.loads("name = ")


def test_metadata_type_checked():
    with pytest.raises(ValueError):
        Metadata.from_dict({"name": "a", "repository": "r", "keywords": "oops"})


def test_metadata_round_trip():
    meta = Metadata(name="a", repository="r", keywords=["x", "y"], license="MIT")
    assert Metadata.from_dict(meta.to_dict()) == meta