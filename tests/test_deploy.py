import pytest

from ampcommon.kube import EnvVar
from ampcommon.schema.deploy import Deploy
from ampcommon.schema.service import Port, Service


def test_env_vars():
    assert Deploy().env_vars() is None
    assert Deploy(env={"LOG": "info"}).env_vars() == [EnvVar(name="LOG", value="info")]


def test_ports_without_services_are_none():
    deploy = Deploy()
    assert deploy.container_ports() is None
    assert deploy.service_ports() is None


def test_ports_of_services_without_ports_are_empty():
    deploy = Deploy(services=[Service(ports=[])])
    assert deploy.container_ports() == []
    assert deploy.service_ports() == []


def test_container_ports_with_ports_present_is_none():
    deploy = Deploy(services=[Service(ports=[Port(port=80)])])
    assert deploy.container_ports() is None


def test_service_ports_ignore_unexposed_ports():
    deploy = Deploy(services=[Service(ports=[Port(port=80), Port(port=81, expose=False)])])
    assert deploy.service_ports() == []


def test_service_ports_with_exposed_port_is_none():
    deploy = Deploy(services=[Service(ports=[Port(port=80, expose=True)])])
    assert deploy.service_ports() is None


def test_empty_deploy_serialises_to_empty_dict():
    assert Deploy().to_dict() == {}


def test_round_trip():
    deploy = Deploy(
        image="nginx:latest",
        command="serve",
        env={"MODE": "prod"},
        args=["--port", "80"],
        services=[Service(ports=[Port(port=80, protocol="TCP", expose=True)], kind="LoadBalancer")],
    )
    assert Deploy.from_dict(deploy.to_dict()) == deploy


@pytest.mark.parametrize(
    "data",
    [{"services": {"ports": []}}, {"services": [{}]}, {"image": 1}, {"args": [1]}, "deploy"],
)
def test_from_dict_rejects_invalid(data):
    with pytest.raises(ValueError):
        Deploy.from_dict(data)