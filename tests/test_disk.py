import pytest

from diskmgr.disk import Disk, DiskType
from diskmgr.parcel import Parcel, ParcelError


def make_sample_disk():
    return Disk("disk-ut-1", 4096, "/dev/block/disk-ut-1", DiskType.USB_FLAG)


def test_sample_disk_fields():
    disk = make_sample_disk()
    assert disk.disk_id == "disk-ut-1"
    assert disk.size_bytes == 4096
    assert disk.disk_type == DiskType.USB_FLAG
    assert disk.removable is True
    assert disk.sys_path == "/dev/block//dev/block/disk-ut-1"


def test_removed_sample_disk_is_cd():
    disk = Disk("disk-removed-ut", 2048, "/dev/block/disk-removed-ut", DiskType.CD_FLAG)
    assert disk.disk_type == DiskType.CD_FLAG
    assert disk.removable is True
    assert not disk.is_internal_data_disk()


def test_default_disk():
    disk = Disk()
    assert disk.disk_id == ""
    assert disk.size_bytes == 0
    assert disk.disk_type == DiskType.DISK_TYPE_UNKNOWN
    assert disk.removable is True
    assert disk.sys_path == ""
    assert disk.volume_ids == []
    assert disk.extra_info == ""


def test_sys_path_from_dev_name():
    assert Disk("disk-8-0", 1, "disk-8-0", DiskType.USB_FLAG).sys_path == "/dev/block/disk-8-0"


@pytest.mark.parametrize("disk_type", [DiskType.DATA_DISK_SSD, DiskType.DATA_DISK_HDD])
def test_internal_disks_are_not_removable(disk_type):
    disk = Disk("d", 1, "d", disk_type)
    assert disk.is_internal_data_disk()
    assert disk.removable is False


def test_setting_disk_type_updates_removable():
    disk = Disk("d", 1, "d", DiskType.USB_FLAG)
    disk.disk_type = DiskType.DATA_DISK_HDD
    assert disk.removable is False
    disk.disk_type = DiskType.SD_FLAG
    assert disk.removable is True


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/devices/platform/soc/block/sr0", DiskType.CD_FLAG),
        ("/devices/pci0000:00/0000:03:00.0/nvme/nvme0/nvme0n1", DiskType.DATA_DISK_SSD),
        ("/devices/platform/ahci/ata/host0/block/sda", DiskType.DATA_DISK_HDD),
        ("/devices/platform/f8000000.sata/host0/block/sdb", DiskType.DATA_DISK_HDD),
        ("/devices/platform/soc/xhci-hcd.0/host0/block/sdc", DiskType.USB_FLAG),
        ("/devices/platform/hiusb/host1/block/sdd", DiskType.USB_FLAG),
        ("/devices/platform/soc/f0000000.ehci/host2/block/sde", DiskType.USB_FLAG),
        ("/devices/platform/soc/dw_mmc.0/mmc0/block/mmcblk1", DiskType.SD_FLAG),
        ("/devices/platform/soc/mmc_host/mmc1/block/mmcblk0", DiskType.SD_FLAG),
    ],
)
def test_classification_from_sysfs(path, expected):
    disk = Disk("d", 1, "d", DiskType.DISK_TYPE_UNKNOWN)
    disk.refresh_classification_from_sysfs(path)
    assert disk.disk_type == expected
    assert disk.removable is (expected not in (DiskType.DATA_DISK_SSD, DiskType.DATA_DISK_HDD))


def test_cd_type_wins_over_path():
    disk = Disk("d", 1, "d", DiskType.CD_FLAG)
    disk.refresh_classification_from_sysfs("/devices/pci/nvme/nvme0")
    assert disk.disk_type == DiskType.CD_FLAG


def test_dvr_usb_is_never_reclassified():
    disk = Disk("d", 1, "d", DiskType.DVR_USB)
    disk.refresh_classification_from_sysfs("/devices/pci/nvme/nvme0")
    assert disk.disk_type == DiskType.DVR_USB
    assert disk.removable is True


@pytest.mark.parametrize("kept", [DiskType.SD_FLAG, DiskType.USB_FLAG, DiskType.CD_FLAG])
def test_unclassified_path_keeps_removable_types(kept):
    disk = Disk("d", 1, "d", kept)
    disk.refresh_classification_from_sysfs("/devices/virtual/block/loop0")
    assert disk.disk_type == kept


def test_empty_path_drops_internal_type_to_unknown():
    disk = Disk("d", 1, "d", DiskType.DATA_DISK_SSD)
    disk.refresh_classification_from_sysfs("")
    assert disk.disk_type == DiskType.DISK_TYPE_UNKNOWN
    assert disk.removable is True


def test_round_trip():
    disk = make_sample_disk()
    disk.volume_ids = ("vol-1", "vol-2")
    disk.extra_info = "extra"
    parcel = Parcel()
    disk.marshal(parcel)
    parcel.rewind(0)
    back = Disk.unmarshal(parcel)
    assert back.disk_id == "disk-ut-1"
    assert back.size_bytes == 4096
    assert back.disk_type == DiskType.USB_FLAG
    assert back.removable is True
    assert back.volume_ids == ["vol-1", "vol-2"]
    assert back.extra_info == "extra"
    assert back.sys_path == ""


def test_unmarshal_keeps_removable_from_wire():
    parcel = Parcel()
    parcel.write_string("d")
    parcel.write_int64(10)
    parcel.write_int32(int(DiskType.USB_FLAG))
    parcel.write_bool(False)
    parcel.write_uint32(0)
    parcel.write_string("")
    parcel.rewind(0)
    back = Disk.unmarshal(parcel)
    assert back.disk_type == DiskType.USB_FLAG
    assert back.removable is False


def test_unmarshal_rejects_too_many_volume_ids():
    parcel = Parcel()
    parcel.write_string("d")
    parcel.write_int64(10)
    parcel.write_int32(int(DiskType.USB_FLAG))
    parcel.write_bool(True)
    parcel.write_uint32(257)
    parcel.rewind(0)
    with pytest.raises(ParcelError):
        Disk.unmarshal(parcel)


def test_unmarshal_truncated_parcel():
    with pytest.raises(ParcelError):
        Disk.unmarshal(Parcel(b"\x01\x00"))