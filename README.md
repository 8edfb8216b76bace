# ampcommon

Data types for *characters*. A character is a TOML manifest that says how a
project is built, how it is deployed, and which partners it depends on.
The package also has:

- provider-neutral source-control models;
- mapping of GitHub REST API payloads onto those models;
- events that describe file synchronization.

It has no dependencies beyond the standard library.

## Installation

```
pip install ampcommon
```

To install it with the test dependencies:

```
pip install "ampcommon[test]"
```

## Characters

Use `Character.load(path)` to read a character from a TOML file. Use
`Character.loads(text)` to parse manifest text that is already in memory.
The manifest must have the top-level keys `name` and `repository`.

```python
from ampcommon.schema.character import Character

character = Character.loads('''
name = "app"
repository = "https://example.com/org/app.git"

[build]
dockerfile = "Dockerfile"
env = { MODE = "release" }

[deploy]
services = [{ ports = [{ port = 8080, expose = true }] }]

[partners.db]
version = "1.0"
''')

print(character.meta.name)              # app
print(character.build.method())         # BuildMethod.DOCKERFILE
print(character.build.env_vars())       # [EnvVar(name='MODE', value='release', value_from=None)]
print(character.partners["db"])         # RegisteredPartner(version='1.0', registry=None)
```

`Character.named(name)` makes a character that has only a name set.

`to_dict()` and `from_dict(data)` convert a character to and from plain
dictionaries. Fields that are not set are left out. The same two methods
exist on `Metadata`, `Build`, `Deploy`, `Service`, `Port` and
`GitReference`. Malformed data raises `ValueError`.

The build settings are stored inline with the other build fields:

- a `dockerfile` key gives a `DockerfileConfig`;
- a `builder` key gives a `BuildpacksConfig`.

When no Dockerfile is set, `Build.method()` returns
`BuildMethod.BUILDPACKS`.

`Deploy.container_ports()` and `Deploy.service_ports()` behave as follows:

- with no services, they return `None`;
- if the services carry no matching ports, they return an empty list;
- if any matching port is present, they return `None`.

`service_ports()` counts only ports marked `expose`.

The Kubernetes value types are `EnvVar`, `ContainerPort` and `ServicePort`,
in `ampcommon.kube`. The same module has `to_env_var(mapping)`.

### Partners

`parse_partner` tries three forms in order and returns the first that fits:

1. `RegisteredPartner` (needs `version`);
2. `GitReference` (needs `repo`);
3. `LocalPartner` (needs `path`).

`partner_to_dict` turns any of the three back into a dictionary.

```python
from ampcommon.schema.partner import parse_partner
from ampcommon.schema.source import GitReference

partner = parse_partner({"repo": "https://example.com/org/app.git", "tag": "v1.0", "path": "app"})
assert isinstance(partner, GitReference)
print(partner.uri())        # https://example.com/org/app.git#v1.0:app
print(partner.reference())  # v1.0 (branch first, then tag, then rev)
print(partner.revision())   # Unknown-Revision-Hash
```

## Source-control models

`ampcommon.scm.models` holds the provider-neutral types:

- `Content`, `File`, `Reference`;
- `Signature`, `Commit`;
- `TreeEntry`, `Tree`;
- `Repository`, `Visibility`, `ListOptions`.

`Visibility.parse` maps `public`, `internal` and `private`. Any other
value becomes `UNKNOWN`.

`ListOptions().to_query()` gives `{"page": "1", "per_page": "30"}`. Values
that are zero are left out.

`ampcommon.scm.refs` has two helpers:

- `trim_ref` strips `refs/heads/` and `refs/tags/`;
- `expand_ref` qualifies a short name, as in
  `expand_ref("main", "refs/heads/")` giving `"refs/heads/main"`.

`ampcommon.urls.host(url)` returns the host of an absolute URL, or `None`
when the URL has none.

`ampcommon.scm.errors` defines `SCMError` and three subclasses for callers
to raise:

- `InvalidRepoAddress`;
- `UnknownDriver`;
- `InvalidHostname`.

### GitHub payloads

`ampcommon.scm.drivers.github` has the API path builders:

- `contents_path`, `branches_path`, `tags_path`;
- `commits_path`, `repos_path`, `trees_path`.

It also has `tree_options`, and payload classes that parse GitHub JSON with
`from_dict`. Each payload class converts its data to the shared models:

- `GithubContent.to_content()` decodes base64;
- `GithubFile.to_file()`;
- `GithubBranch.to_reference()`;
- `GithubCommit.to_commit()`;
- `GithubTree.to_tree()`;
- `GithubRepository.to_repository()`.

```python
from ampcommon.scm.drivers.github import GithubBranch, branches_path

print(branches_path("octo/app"))    # /repos/octo/app/branches

branch = GithubBranch.from_dict({
    "name": "main",
    "commit": {"sha": "abc123", "url": "https://example.com/c/abc123"},
    "protected": False,
})
print(branch.to_reference().path)   # refs/heads/main
```

## Synchronization events

```python
from ampcommon.sync.events import EventKinds, PathKind, SyncPath, Synchronization

sync = Synchronization(
    kind=EventKinds.MODIFY,
    paths=[SyncPath(PathKind.FILE, "src/main.py")],
    payload=b"\x00\x01",
)
assert Synchronization.from_dict(sync.to_dict()) == sync

EventKinds.from_name("Rename")                  # EventKinds.RENAME
EventKinds.from_fs_event("modify", "name/both") # EventKinds.RENAME
EventKinds.from_fs_event("access")              # EventKinds.OTHER
```

## What this package does not do

- It makes no network requests. It has no HTTP client and cannot fetch
  contents, branches, tags, commits, trees or repositories from a provider.
  It builds API paths and converts payloads that you have already fetched.
- It does not pick a provider from a repository address or from
  credentials.
- It maps GitHub payloads only.
- It does not watch the file system. `EventKinds.from_fs_event` classifies
  event names that a watcher supplies.
- It has no command-line interface.

## Running the tests

```
pytest
```