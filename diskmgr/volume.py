"""Volumes, their states and file system types."""

from dataclasses import dataclass, field
from enum import IntEnum

from .disk import DiskType


class VolumeType(IntEnum):
    EMULATED = 1
    EXTERNAL = 2


class VolumeState(IntEnum):
    UNMOUNTED = 0
    CHECKING = 1
    MOUNTED = 2
    EJECTING = 3
    REMOVED = 4
    BAD_REMOVAL = 5
    DAMAGED = 6
    FUSE_REMOVED = 7
    DAMAGED_MOUNTED = 8
    ENCRYPTING = 9
    ENCRYPTED_AND_LOCKED = 10
    ENCRYPTED_AND_UNLOCKED = 11
    DECRYPTING = 12


class FsType(IntEnum):
    UNDEFINED = -1
    NTFS = 0
    EXFAT = 1
    VFAT = 2
    HMFS = 3
    F2FS = 4
    MTP = 5
    UDF = 6
    ISO9660 = 7
    PTP = 8
    EXT4 = 9


FS_TYPE_NAMES = {
    FsType.NTFS: "ntfs",
    FsType.EXFAT: "exfat",
    FsType.VFAT: "vfat",
    FsType.HMFS: "hmfs",
    FsType.F2FS: "f2fs",
    FsType.MTP: "mtp",
    FsType.UDF: "udf",
    FsType.ISO9660: "iso9660",
    FsType.PTP: "ptp",
    FsType.EXT4: "ext4",
}


def fs_type_from_str(fs_type_str):
    """Return the FsType named ``fs_type_str``, or FsType.UNDEFINED."""
    for fs_type, name in FS_TYPE_NAMES.items():
        if name == fs_type_str:
            return fs_type
    return FsType.UNDEFINED


@dataclass
class VolumeInfoStr:
    """Volume description carried entirely as text fields."""

    volume_id: str = ""
    fs_type_str: str = ""
    fs_uuid: str = ""
    path: str = ""
    description: str = ""
    is_damaged: bool = False

    def marshal(self, parcel):
        parcel.write_string(self.volume_id)
        parcel.write_string(self.fs_type_str)
        parcel.write_string(self.fs_uuid)
        parcel.write_string(self.path)
        parcel.write_string(self.description)
        parcel.write_bool(self.is_damaged)

    @classmethod
    def unmarshal(cls, parcel):
        return cls(
            volume_id=parcel.read_string(),
            fs_type_str=parcel.read_string(),
            fs_uuid=parcel.read_string(),
            path=parcel.read_string(),
            description=parcel.read_string(),
            is_damaged=parcel.read_bool(),
        )


@dataclass
class VolumeCore:
    """Identity and state of a volume."""

    volume_id: str = ""
    volume_type: int = 0
    disk_id: str = ""
    state: int = VolumeState.UNMOUNTED
    fs_type: str = ""
    error_flag: bool = field(default=False, init=False)

    def marshal(self, parcel):
        parcel.write_string(self.volume_id)
        parcel.write_int32(self.volume_type)
        parcel.write_string(self.disk_id)
        parcel.write_int32(self.state)
        parcel.write_bool(self.error_flag)
        parcel.write_string(self.fs_type)

    @classmethod
    def unmarshal(cls, parcel):
        core = VolumeCore(
            volume_id=parcel.read_string(),
            volume_type=parcel.read_int32(),
            disk_id=parcel.read_string(),
            state=parcel.read_int32(),
        )
        core.error_flag = parcel.read_bool()
        core.fs_type = parcel.read_string()
        return core


@dataclass
class VolumeExternal(VolumeCore):
    """An external volume with its mount details."""

    flags: int = DiskType.DISK_TYPE_UNKNOWN
    fs_type_code: int = FsType.UNDEFINED
    fs_uuid: str = ""
    path: str = ""
    description: str = ""
    extra_info: str = ""
    is_user_data: bool = False
    partition_num: int = 0
    free_size: int = 0

    @classmethod
    def from_core(cls, core):
        """Build an external volume from the identity fields of ``core``."""
        return cls(
            volume_id=core.volume_id,
            volume_type=core.volume_type,
            disk_id=core.disk_id,
            state=core.state,
            fs_type=core.fs_type,
        )

    def fs_type_string(self):
        """Name of the file system type, or "undefined"."""
        return FS_TYPE_NAMES.get(self.fs_type_code, "undefined")

    def reset(self):
        self.path = ""

    def marshal(self, parcel):
        super().marshal(parcel)
        parcel.write_int32(self.flags)
        parcel.write_int32(self.fs_type_code)
        parcel.write_string(self.fs_uuid)
        parcel.write_string(self.path)
        parcel.write_string(self.description)
        parcel.write_string(self.extra_info)
        parcel.write_int32(self.partition_num)

    @classmethod
    def unmarshal(cls, parcel):
        volume = cls.from_core(VolumeCore.unmarshal(parcel))
        volume.flags = parcel.read_int32()
        volume.fs_type_code = parcel.read_int32()
        volume.fs_uuid = parcel.read_string()
        volume.path = parcel.read_string()
        volume.description = parcel.read_string()
        volume.extra_info = parcel.read_string()
        volume.partition_num = parcel.read_int32()
        return volume