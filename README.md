# diskmgr

A small library that describes disks, volumes and partitions. It has three parts:

- a binary **parcel** codec that writes and reads these records,
- a **client** that forwards calls to a disk manager service you supply,
- the error codes such a service reports.

It needs only the standard library.

## Installation

```
pip install .
```

To install the test tools too:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `diskmgr.errors` | `DiskManagerErrNo`, `DiskManagerNativeErr`, `DiskManagerJsErr`, extension code constants, and the `DiskManagerError` exception, which carries a numeric `code` and a `message` |
| `diskmgr.parcel` | `Parcel`, a little-endian, 4-byte aligned byte buffer with typed `write_*` / `read_*` methods, `rewind()` and `to_bytes()`, and `ParcelError` |
| `diskmgr.disk` | `DiskType` and `Disk`, including classification from a sysfs device path |
| `diskmgr.volume` | `VolumeType`, `VolumeState`, `FsType`, `FS_TYPE_NAMES`, `VolumeInfoStr`, `VolumeCore`, `VolumeExternal`, `fs_type_from_str` |
| `diskmgr.partition` | `PartitionInfo`, `PartitionTableInfo`, `PartitionParams`, `FormatParams` |
| `diskmgr.client` | `DiskManagerService`, the abstract interface a backend implements, and `DiskManagerClient` |

## Serialising records

Every record has a `marshal(parcel)` method and an `unmarshal(parcel)` class method:

```python
from diskmgr.parcel import Parcel
from diskmgr.disk import Disk, DiskType

disk = Disk("disk-8-0", 4096, "disk-8-0", DiskType.USB_FLAG)
disk.volume_ids = ["vol-8-1"]

parcel = Parcel()
disk.marshal(parcel)

restored = Disk.unmarshal(Parcel(parcel.to_bytes()))
assert restored.volume_ids == ["vol-8-1"]
```

`ParcelError` is raised when:

- a value written is not of the right kind or does not fit its integer width,
- the data being read is truncated, holds a negative string length or is not valid UTF-8,
- a count is larger than the format allows: 256 volume ids per disk and 256 partitions per table (checked both when reading and, for partition tables, when writing).

`PartitionTableInfo.last_usable_sector` is kept in memory only and is not written to the parcel.

## Classifying a disk

```python
from diskmgr.disk import Disk, DiskType

disk = Disk("disk-8-0", 0, "sda", DiskType.DISK_TYPE_UNKNOWN)
disk.refresh_classification_from_sysfs("/sys/devices/pci0000:00/nvme/nvme0/block/nvme0n1")
assert disk.disk_type == DiskType.DATA_DISK_SSD
assert not disk.removable
```

Only SSD and HDD data disks are non-removable. A `DVR_USB` disk keeps its type. If the path says nothing recognisable, SD, USB and CD disks keep their type and any other becomes `DISK_TYPE_UNKNOWN`.

## Filesystem types

`VolumeExternal.fs_type_code` holds the numeric `FsType`; the inherited `fs_type` field is a free text string.

```python
from diskmgr.volume import VolumeExternal, FsType, fs_type_from_str

assert fs_type_from_str("exfat") == FsType.EXFAT
vol = VolumeExternal()
vol.fs_type_code = FsType.VFAT
assert vol.fs_type_string() == "vfat"
```

Unknown names map to `FsType.UNDEFINED`, and an unknown code gives `"undefined"`.

## Using the client

`DiskManagerClient` takes a locator: a callable with no arguments that returns a system ability registry, or `None` when no registry is reachable. The registry provides:

- `get_system_ability()` — the running service, or `None`;
- `load_system_ability(on_success, on_failure)` — requests a start and returns a true value if accepted, then later calls `on_success(remote)` or `on_failure()`.

The client:

- connects lazily, on the first call, waiting up to `load_timeout` seconds (30 by default) for a load;
- requires the remote to be a `DiskManagerService` instance and registers a death recipient on it;
- keeps the connection until `reset_proxy()` is called or the service reports its death;
- raises `DiskManagerError` with `E_SA_IS_NULLPTR`, `E_REMOTE_IS_NULLPTR` or `E_SERVICE_IS_NULLPTR` from `DiskManagerNativeErr` if it cannot connect;
- passes other errors from the service on, except in `notify_mtp_mounted` and `notify_mtp_unmounted`, which log and ignore a `DiskManagerError` raised by the service.

```python
from diskmgr.client import DiskManagerClient
from diskmgr.errors import DiskManagerError

client = DiskManagerClient(lambda: None)
try:
    client.mount("vol-1")
except DiskManagerError as exc:
    print(exc.code)
```

## What this package does not do

It contains no disk manager service: nothing here mounts, formats, partitions or burns anything, watches uevents or reads sysfs. Those operations are performed by whatever `DiskManagerService` implementation the locator hands to the client. There is no command-line program.