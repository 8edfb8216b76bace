import pytest

from ampcommon.urls import host


def test_host_of_github_repository():
    assert host("https://github.com/amphitheatre-app/amphitheatre.git") == "github.com"


def test_host_of_bare_origin():
    assert host("https://gitlab.com") == "gitlab.com"


def test_host_is_lowercased():
    assert host("https://GitHub.com/x") == "github.com"


def test_host_drops_port():
    assert host("https://atomgit.company.com:8443/x") == "atomgit.company.com"


@pytest.mark.parametrize(
    "url",
    [
        "github.com/foo/bar",
        "",
        "not a url",
        "mailto:someone@example.com",
        "file:///tmp/repo",
        "http://example.com:notaport/",
    ],
)
def test_host_none_for_urls_without_host(url):
    assert host(url) is None