"""Block disks as seen by the disk manager, and their classification."""

from enum import IntEnum

from .parcel import ParcelError

_DISK_VOLUME_IDS_PARCEL_MAX = 256
_BLOCK_DEV_DIR = "/dev/block/"


class DiskType(IntEnum):
    """Kinds of disk, numbered as the volume manager API reports them."""

    SD_FLAG = 1
    USB_FLAG = 2
    CD_FLAG = 3
    DATA_DISK_SSD = 4
    DATA_DISK_HDD = 5
    DVR_USB = 6
    DISK_TYPE_UNKNOWN = 255


_INTERNAL_DATA_DISK_TYPES = frozenset({DiskType.DATA_DISK_SSD, DiskType.DATA_DISK_HDD})
_KEPT_WHEN_UNCLASSIFIED = frozenset({DiskType.SD_FLAG, DiskType.USB_FLAG, DiskType.CD_FLAG})

_USB_MARKERS = (
    "/usb", "usbhost",
    "/hiusb/", "platform/hiusb",
    ".ehci", "/ehci", "ehci/",
    "xhci", ".dwc3", "/dwc3/",
)
_MMC_MARKERS = ("mmc_host", "dwmmc", "hi_mci", "dw_mmc")
_SATA_MARKERS = ("/ata/", ".sata/")


def _contains_any(path, markers):
    return any(marker in path for marker in markers)


def _classify_sysfs_path(path):
    """Return the disk type implied by a sysfs device path, or None."""
    if "/block/sr" in path:
        return DiskType.CD_FLAG
    if "/nvme" in path:
        return DiskType.DATA_DISK_SSD
    if _contains_any(path, _SATA_MARKERS):
        return DiskType.DATA_DISK_HDD
    if _contains_any(path, _USB_MARKERS):
        return DiskType.USB_FLAG
    if _contains_any(path, _MMC_MARKERS):
        return DiskType.SD_FLAG
    return None


class Disk:
    """A physical disk with its size, type and the volumes on it."""

    def __init__(self, disk_id="", size_bytes=0, dev_name=None, disk_type=DiskType.DISK_TYPE_UNKNOWN):
        self._disk_id = disk_id
        self.size_bytes = size_bytes
        self._disk_type = int(disk_type)
        self._removable = True
        self._volume_ids = []
        self.extra_info = ""
        self._sys_path = "" if dev_name is None else _BLOCK_DEV_DIR + dev_name
        self._update_removable()

    def __repr__(self):
        return (
            f"Disk(disk_id={self._disk_id!r}, size_bytes={self.size_bytes}, "
            f"disk_type={self._disk_type}, removable={self._removable}, "
            f"volume_ids={self._volume_ids!r}, extra_info={self.extra_info!r})"
        )

    @property
    def disk_id(self):
        return self._disk_id

    @property
    def disk_type(self):
        return self._disk_type

    @disk_type.setter
    def disk_type(self, value):
        self._disk_type = int(value)
        self._update_removable()

    @property
    def removable(self):
        """False only for internal SSD and HDD data disks."""
        return self._removable

    @property
    def volume_ids(self):
        return self._volume_ids

    @volume_ids.setter
    def volume_ids(self, value):
        self._volume_ids = list(value)

    @property
    def sys_path(self):
        """Block device node path, such as /dev/block/disk-8-0."""
        return self._sys_path

    def is_internal_data_disk(self):
        return self._disk_type in _INTERNAL_DATA_DISK_TYPES

    def _update_removable(self):
        self._removable = not self.is_internal_data_disk()

    def refresh_classification_from_sysfs(self, sysfs_path):
        """Reclassify the disk from the sysfs path of its uevent."""
        if self._disk_type == DiskType.DVR_USB:
            self._update_removable()
            return

        classified = None
        if sysfs_path:
            if self._disk_type == DiskType.CD_FLAG:
                classified = DiskType.CD_FLAG
            else:
                classified = _classify_sysfs_path(sysfs_path)
        if classified is None:
            if self._disk_type in _KEPT_WHEN_UNCLASSIFIED:
                classified = self._disk_type
            else:
                classified = DiskType.DISK_TYPE_UNKNOWN

        self._disk_type = int(classified)
        self._update_removable()

    def marshal(self, parcel):
        """Write the exported fields to ``parcel``."""
        parcel.write_string(self._disk_id)
        parcel.write_int64(self.size_bytes)
        parcel.write_int32(self._disk_type)
        parcel.write_bool(self._removable)
        parcel.write_uint32(len(self._volume_ids))
        for volume_id in self._volume_ids:
            parcel.write_string(volume_id)
        parcel.write_string(self.extra_info)

    @classmethod
    def unmarshal(cls, parcel):
        """Read a disk written by :meth:`marshal`."""
        disk_id = parcel.read_string()
        size_bytes = parcel.read_int64()
        disk_type = parcel.read_int32()
        removable = parcel.read_bool()
        count = parcel.read_uint32()
        if count > _DISK_VOLUME_IDS_PARCEL_MAX:
            raise ParcelError(f"too many volume ids: {count} > {_DISK_VOLUME_IDS_PARCEL_MAX}")
        volume_ids = [parcel.read_string() for _ in range(count)]
        extra_info = parcel.read_string()

        disk = cls(disk_id, size_bytes, None, disk_type)
        disk._removable = removable
        disk._volume_ids = volume_ids
        disk.extra_info = extra_info
        return disk