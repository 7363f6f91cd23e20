"""Client of the disk manager system service.

The client finds the service through a *locator* and keeps the connection
until the service dies or the proxy is reset.

The locator is a callable taking no arguments. It returns the system ability
registry, or ``None`` when no registry is reachable. The registry provides:

``get_system_ability()``
    The running disk manager service, or ``None`` if it is not loaded.

``load_system_ability(on_success, on_failure)``
    Ask for the service to be started. Returns a true value if the request
    was accepted. Later, and possibly from another thread, it calls
    ``on_success(remote)`` or ``on_failure()``.

Failures to reach the service raise :class:`DiskManagerError` carrying the
service's error code. Errors raised by the service itself are passed on.
"""

import abc
import logging
import threading

from .errors import DiskManagerError, DiskManagerNativeErr

_log = logging.getLogger(__name__)

SA_LOAD_WAIT_TIMEOUT = 30.0


class DiskManagerService(abc.ABC):
    """The operations the disk manager service offers to its clients."""

    def add_death_recipient(self, recipient):
        """Arrange for ``recipient()`` to be called when the service dies."""

    def remove_death_recipient(self, recipient):
        """Stop notifying ``recipient`` of the service's death."""

    @abc.abstractmethod
    def mount(self, volume_id):
        """Mount a volume."""

    @abc.abstractmethod
    def unmount(self, volume_id):
        """Unmount a volume."""

    @abc.abstractmethod
    def format(self, volume_id, fs_type):
        """Format a volume with the named file system."""

    @abc.abstractmethod
    def set_volume_description(self, fs_uuid, description):
        """Change the description of the volume with this file system UUID."""

    @abc.abstractmethod
    def get_all_volumes(self):
        """Return every known external volume."""

    @abc.abstractmethod
    def get_volume_by_uuid(self, uuid):
        """Return the volume with this file system UUID."""

    @abc.abstractmethod
    def get_volume_by_id(self, volume_id):
        """Return the volume with this id."""

    @abc.abstractmethod
    def get_free_size_of_volume(self, volume_uuid):
        """Return the free bytes on a volume."""

    @abc.abstractmethod
    def get_total_size_of_volume(self, volume_uuid):
        """Return the total bytes of a volume."""

    @abc.abstractmethod
    def get_all_disks(self):
        """Return every known disk."""

    @abc.abstractmethod
    def get_disk_by_id(self, disk_id):
        """Return the disk with this id."""

    @abc.abstractmethod
    def partition(self, disk_id, partition_type):
        """Repartition a disk."""

    @abc.abstractmethod
    def get_partition_table(self, disk_id):
        """Return the partition table of a disk."""

    @abc.abstractmethod
    def create_partition(self, disk_id, params):
        """Create a partition on a disk."""

    @abc.abstractmethod
    def delete_partition(self, disk_id, partition_num):
        """Delete a partition from a disk."""

    @abc.abstractmethod
    def format_partition(self, disk_id, partition_num, params):
        """Format a partition of a disk."""

    @abc.abstractmethod
    def erase_volume(self, volume_id):
        """Erase a rewritable optical disc."""

    @abc.abstractmethod
    def eject_volume(self, volume_id):
        """Eject the medium of a volume."""

    @abc.abstractmethod
    def create_iso_image(self, volume_id, file_path):
        """Write the volume to an ISO image file."""

    @abc.abstractmethod
    def burn_volume(self, volume_id, burn_options):
        """Burn data to an optical disc."""

    @abc.abstractmethod
    def get_volume_op_process(self, volume_id):
        """Return the progress percentage of the current volume operation."""

    @abc.abstractmethod
    def verify_burn_data(self, volume_id, verify_type):
        """Verify burned data."""

    @abc.abstractmethod
    def try_to_fix(self, volume_id):
        """Try to repair a damaged volume."""

    @abc.abstractmethod
    def query_usb_is_in_use(self, mount_path):
        """Return whether the USB volume mounted at ``mount_path`` is busy."""

    @abc.abstractmethod
    def is_usb_fuse_by_type(self, fuse_type):
        """Return whether USB volumes of this type are served through FUSE."""

    @abc.abstractmethod
    def notify_mtp_mounted(self, volume_id, path, desc, uuid, fs_type):
        """Report that an MTP device was mounted."""

    @abc.abstractmethod
    def notify_mtp_unmounted(self, volume_id, is_bad_remove):
        """Report that an MTP device was unmounted."""

    @abc.abstractmethod
    def on_block_disk_uevent(self, raw_uevent_msg):
        """Hand a raw block disk uevent to the service."""


class _LoadWaiter:
    """Collects the outcome of an asynchronous service load."""

    def __init__(self):
        self._done = threading.Event()
        self.success = False
        self.remote = None

    def on_success(self, remote):
        self.remote = remote
        self.success = True
        self._done.set()

    def on_failure(self):
        self.success = False
        self._done.set()

    def wait(self, timeout):
        return self._done.wait(timeout)


class DiskManagerClient:
    """Connects to the disk manager service and forwards calls to it."""

    load_timeout = SA_LOAD_WAIT_TIMEOUT

    def __init__(self, locator=None):
        self._locator = locator
        self._service = None
        self._death_recipient = None
        self._lock = threading.Lock()

    def _fetch_remote(self, registry):
        remote = registry.get_system_ability()
        if remote is not None:
            return remote
        waiter = _LoadWaiter()
        if not registry.load_system_ability(waiter.on_success, waiter.on_failure):
            _log.error("load of disk manager service was refused")
            raise DiskManagerError(DiskManagerNativeErr.E_REMOTE_IS_NULLPTR, "service load refused")
        if not waiter.wait(self.load_timeout) or not waiter.success:
            _log.error("disk manager service did not load within %ss", self.load_timeout)
            raise DiskManagerError(DiskManagerNativeErr.E_REMOTE_IS_NULLPTR, "service load failed")
        if waiter.remote is None:
            raise DiskManagerError(DiskManagerNativeErr.E_REMOTE_IS_NULLPTR, "service load returned nothing")
        return waiter.remote

    def _connect(self):
        with self._lock:
            if self._service is None:
                registry = self._locator() if self._locator is not None else None
                if registry is None:
                    _log.error("system ability manager unavailable")
                    raise DiskManagerError(
                        DiskManagerNativeErr.E_SA_IS_NULLPTR, "system ability manager unavailable"
                    )
                remote = self._fetch_remote(registry)
                if not isinstance(remote, DiskManagerService):
                    _log.error("remote object is not a disk manager service")
                    raise DiskManagerError(
                        DiskManagerNativeErr.E_SERVICE_IS_NULLPTR, "remote is not a disk manager service"
                    )
                self._service = remote
                self._death_recipient = self._on_remote_died
                remote.add_death_recipient(self._death_recipient)
            return self._service

    def _on_remote_died(self):
        self.reset_proxy()

    def reset_proxy(self):
        """Drop the connection; the next call reconnects."""
        _log.info("reset proxy")
        with self._lock:
            if self._service is not None and self._death_recipient is not None:
                self._service.remove_death_recipient(self._death_recipient)
            self._service = None
            self._death_recipient = None

    def mount(self, volume_id):
        _log.info("mount volume_id=%s", volume_id)
        return self._connect().mount(volume_id)

    def unmount(self, volume_id):
        _log.info("unmount volume_id=%s", volume_id)
        return self._connect().unmount(volume_id)

    def format(self, volume_id, fs_type):
        _log.info("format volume_id=%s fs_type=%s", volume_id, fs_type)
        return self._connect().format(volume_id, fs_type)

    def set_volume_description(self, fs_uuid, description):
        _log.info("set volume description fs_uuid=%s", fs_uuid)
        return self._connect().set_volume_description(fs_uuid, description)

    def get_all_volumes(self):
        _log.info("get all volumes")
        return self._connect().get_all_volumes()

    def get_volume_by_uuid(self, uuid):
        _log.info("get volume by uuid=%s", uuid)
        return self._connect().get_volume_by_uuid(uuid)

    def get_volume_by_id(self, volume_id):
        _log.info("get volume by id=%s", volume_id)
        return self._connect().get_volume_by_id(volume_id)

    def get_free_size_of_volume(self, volume_uuid):
        _log.info("get free size of volume uuid=%s", volume_uuid)
        return self._connect().get_free_size_of_volume(volume_uuid)

    def get_total_size_of_volume(self, volume_uuid):
        _log.info("get total size of volume uuid=%s", volume_uuid)
        return self._connect().get_total_size_of_volume(volume_uuid)

    def get_all_disks(self):
        _log.info("get all disks")
        return self._connect().get_all_disks()

    def get_disk_by_id(self, disk_id):
        _log.info("get disk by id=%s", disk_id)
        return self._connect().get_disk_by_id(disk_id)

    def partition(self, disk_id, partition_type):
        _log.info("partition disk_id=%s type=%s", disk_id, partition_type)
        return self._connect().partition(disk_id, partition_type)

    def get_partition_table(self, disk_id):
        _log.info("get partition table disk_id=%s", disk_id)
        return self._connect().get_partition_table(disk_id)

    def create_partition(self, disk_id, params):
        _log.info("create partition disk_id=%s partition_num=%s", disk_id, params.partition_num)
        return self._connect().create_partition(disk_id, params)

    def delete_partition(self, disk_id, partition_num):
        _log.info("delete partition disk_id=%s partition_num=%s", disk_id, partition_num)
        return self._connect().delete_partition(disk_id, partition_num)

    def format_partition(self, disk_id, partition_num, params):
        _log.info(
            "format partition disk_id=%s partition_num=%s fs_type=%s",
            disk_id, partition_num, params.fs_type,
        )
        return self._connect().format_partition(disk_id, partition_num, params)

    def erase_volume(self, volume_id):
        _log.info("erase volume_id=%s", volume_id)
        return self._connect().erase_volume(volume_id)

    def eject_volume(self, volume_id):
        _log.info("eject volume_id=%s", volume_id)
        return self._connect().eject_volume(volume_id)

    def create_iso_image(self, volume_id, file_path):
        _log.info("create iso image volume_id=%s", volume_id)
        return self._connect().create_iso_image(volume_id, file_path)

    def burn_volume(self, volume_id, burn_options):
        _log.info("burn volume_id=%s", volume_id)
        return self._connect().burn_volume(volume_id, burn_options)

    def get_volume_op_process(self, volume_id):
        _log.info("get volume op process volume_id=%s", volume_id)
        return self._connect().get_volume_op_process(volume_id)

    def verify_burn_data(self, volume_id, verify_type):
        _log.info("verify burn data volume_id=%s type=%s", volume_id, verify_type)
        return self._connect().verify_burn_data(volume_id, verify_type)

    def try_to_fix(self, volume_id):
        _log.info("try to fix volume_id=%s", volume_id)
        return self._connect().try_to_fix(volume_id)

    def query_usb_is_in_use(self, mount_path):
        _log.info("query usb in use mount_path=%s", mount_path)
        return self._connect().query_usb_is_in_use(mount_path)

    def is_usb_fuse_by_type(self, fuse_type):
        _log.info("is usb fuse by type=%s", fuse_type)
        return self._connect().is_usb_fuse_by_type(fuse_type)

    def notify_mtp_mounted(self, volume_id, path, desc, uuid, fs_type):
        """Report an MTP mount; errors from the service itself are ignored."""
        _log.info("notify mtp mounted id=%s path=%s desc=%s", volume_id, path, desc)
        service = self._connect()
        try:
            service.notify_mtp_mounted(volume_id, path, desc, uuid, fs_type)
        except DiskManagerError as exc:
            _log.warning("notify mtp mounted id=%s ignored error %s", volume_id, exc.code)

    def notify_mtp_unmounted(self, volume_id, is_bad_remove):
        """Report an MTP unmount; errors from the service itself are ignored."""
        _log.info("notify mtp unmounted id=%s bad_remove=%s", volume_id, is_bad_remove)
        service = self._connect()
        try:
            service.notify_mtp_unmounted(volume_id, is_bad_remove)
        except DiskManagerError as exc:
            _log.warning("notify mtp unmounted id=%s ignored error %s", volume_id, exc.code)

    def on_block_disk_uevent(self, raw_uevent_msg):
        _log.info("block disk uevent len=%d", len(raw_uevent_msg))
        return self._connect().on_block_disk_uevent(raw_uevent_msg)