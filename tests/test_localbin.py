import os

import pytest

from ossup.localbin import (
    WebMount,
    mount_binaries,
    mount_web_dir,
    resolve_target,
    strip_numeric,
)
from ossup.service import ServiceConfig, ServiceVolume, create_bind


@pytest.mark.parametrize(
    "name, expected",
    [
        ("storagenode", "storagenode"),
        ("storagenode1", "storagenode"),
        ("satellite-api12", "satellite-api"),
        ("123", ""),
        ("", ""),
    ],
)
def test_strip_numeric(name, expected):
    assert strip_numeric(name) == expected


def test_mount_binaries_uses_dictionary(tmp_path):
    (tmp_path / "satellite").write_text("bin")
    service = ServiceConfig(name="satellite-api1")
    mount_binaries(service, str(tmp_path))
    assert service.volumes == [
        ServiceVolume(
            type="bind",
            source=os.path.join(str(tmp_path), "satellite"),
            target="/var/lib/oss/go/bin/satellite",
        )
    ]


def test_mount_binaries_command_and_subdir(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "uplink").write_text("bin")
    service = ServiceConfig(name="storagenode")
    mount_binaries(service, str(tmp_path), subdir="sub", command="uplink")
    assert service.volumes[0].source == os.path.join(str(tmp_path), "sub", "uplink")
    assert service.volumes[0].target.endswith("/uplink")


def test_mount_binaries_replaces_existing(tmp_path):
    (tmp_path / "storagenode").write_text("bin")
    keep = create_bind("/data", "/var/lib/oss/data")
    old = create_bind("/old/storagenode", "/var/lib/oss/go/bin/storagenode")
    service = ServiceConfig(name="storagenode", volumes=[keep, old])
    mount_binaries(service, str(tmp_path))
    assert len(service.volumes) == 2
    assert service.volumes[0] == keep
    assert service.volumes[1].source == os.path.join(str(tmp_path), "storagenode")


def test_mount_binaries_missing_file(tmp_path):
    service = ServiceConfig(name="storagenode")
    with pytest.raises(FileNotFoundError):
        mount_binaries(service, str(tmp_path))
    assert service.volumes == []


def test_resolve_target_satellite():
    mount = resolve_target("/home/dev/oss/web/satellite")
    assert mount == WebMount(("satellite-api",), "/var/lib/oss/oss/web/satellite")


def test_resolve_target_admin():
    mount = resolve_target("/src/satellite/admin/ui")
    assert mount.services == ("satellite-admin",)
    assert mount.target_path == "/var/lib/oss/oss/satellite/admin/ui"


def test_resolve_target_unknown():
    with pytest.raises(ValueError):
        resolve_target("/nowhere")


def test_mount_web_dir_idempotent():
    service = ServiceConfig(name="storagenode")
    mount_web_dir(service, "/src/web/storagenode", "/var/lib/oss/web/storagenode")
    mount_web_dir(service, "/src/web/storagenode", "/var/lib/oss/web/storagenode")
    assert service.volumes == [
        create_bind("/src/web/storagenode", "/var/lib/oss/web/storagenode")
    ]