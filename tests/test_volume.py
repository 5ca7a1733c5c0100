import pytest

from gfsplugin.volume import (
    Capability,
    CreateRequest,
    MountRequest,
    Volume,
    VolumeDriver,
)


def test_create_request_valid():
    req = CreateRequest(name="test", options={})
    assert req.validate() is req


@pytest.mark.parametrize(
    "req, message",
    [
        (CreateRequest(name="", options={}), "volume name cannot be empty"),
        (CreateRequest(name="test", options=None), "options cannot be nil"),
    ],
)
def test_create_request_invalid(req, message):
    with pytest.raises(ValueError, match=message):
        req.validate()


def test_create_request_default_options_are_empty_and_separate():
    a = CreateRequest(name="a")
    b = CreateRequest(name="b")
    a.options["servers"] = "server1"
    assert b.options == {}


def test_mount_request_valid():
    req = MountRequest(name="test", mountpoint="/mnt/test")
    assert req.validate() is req


@pytest.mark.parametrize(
    "req, message",
    [
        (MountRequest(name="", mountpoint="/mnt/test"), "volume name cannot be empty"),
        (MountRequest(name="test", mountpoint=""), "mount point cannot be empty"),
    ],
)
def test_mount_request_invalid(req, message):
    with pytest.raises(ValueError, match=message):
        req.validate()


def test_volume_status_defaults_separate():
    a = Volume(name="a")
    b = Volume(name="b")
    a.status["state"] = "mounted"
    assert b.status == {}
    assert a.status == {"state": "mounted"}


def test_capability_equality():
    assert Capability(scope="local") == Capability(scope="local")
    assert Capability(scope="local") != Capability(scope="global")


def test_volume_driver_is_abstract():
    with pytest.raises(TypeError):
        VolumeDriver()


def test_volume_driver_subclass_works():
    class Dummy(VolumeDriver):
        def validate(self, req):
            return None

        def mount_options(self, req):
            return ["--volfile-id=" + req.name]

        def pre_mount(self, req):
            return None

        def post_mount(self, req):
            return None

    assert Dummy().mount_options(CreateRequest(name="vol")) == ["--volfile-id=vol"]