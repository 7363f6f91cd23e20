"""Error codes shared by the disk manager service and its clients."""

from enum import IntEnum

STORAGE_SERVICE_SYS_CAP_TAG = 13600000
DISK_MANAGER_SYS_CAP_TAG = 13610000


class DiskManagerErrNo(IntEnum):
    """Return codes of the disk manager component itself."""

    E_OK = 0
    DISK_MGR_ERR = -1

    E_SA_IS_NULLPTR = 10
    E_REMOTE_IS_NULLPTR = 11
    E_SERVICE_IS_NULLPTR = 12
    E_DEATH_RECIPIENT_IS_NULLPTR = 13

    E_DISK_NOT_FOUND = 20
    E_VOLUME_NOT_FOUND = 21
    E_UEVENT_PARSE_FAILED = 22
    E_DAEMON_IPC_FAILED = 23
    E_DISK_HAS_EXIST = 24
    E_DESTROY_DEVICE_NODE = 25

    E_PARAMS_INVALID = STORAGE_SERVICE_SYS_CAP_TAG + 2
    E_NON_EXIST = STORAGE_SERVICE_SYS_CAP_TAG + 4
    E_STATVFS = STORAGE_SERVICE_SYS_CAP_TAG + 1204

    E_OTHER_MOUNT = STORAGE_SERVICE_SYS_CAP_TAG + 1715

    E_VOL_STATE = STORAGE_SERVICE_SYS_CAP_TAG + 1701
    E_NO_CHILD = STORAGE_SERVICE_SYS_CAP_TAG + 1705
    E_GET_PARTITION_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1739
    E_CREATE_PARTITION_NOT_SUPPORT = STORAGE_SERVICE_SYS_CAP_TAG + 1740
    E_CREATE_PARTITION_TIMEOUT = STORAGE_SERVICE_SYS_CAP_TAG + 1741
    E_CREATE_PARTITION_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1742
    E_DELETE_PARTITION_NOT_SUPPORT = STORAGE_SERVICE_SYS_CAP_TAG + 1743
    E_DELETE_PARTITION_TIMEOUT = STORAGE_SERVICE_SYS_CAP_TAG + 1744
    E_DELETE_PARTITION_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1745
    E_GET_PARTITION_TIMEOUT = STORAGE_SERVICE_SYS_CAP_TAG + 1746
    E_SET_USABLE_SECTOR_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1747
    E_FORMAT_PARTITION_NOT_SUPPORT = STORAGE_SERVICE_SYS_CAP_TAG + 1748
    E_FORMAT_PARTITION_TIMEOUT = STORAGE_SERVICE_SYS_CAP_TAG + 1749
    E_FORMAT_PARTITION_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1750


class DiskManagerNativeErr(IntEnum):
    """Native return codes aligned with the storage service."""

    E_OK = 0

    E_PERMISSION_DENIED = STORAGE_SERVICE_SYS_CAP_TAG + 1
    E_PARAMS_INVALID = STORAGE_SERVICE_SYS_CAP_TAG + 2
    E_NON_EXIST = STORAGE_SERVICE_SYS_CAP_TAG + 4
    E_PREPARE_DIR = STORAGE_SERVICE_SYS_CAP_TAG + 5
    E_DESTROY_DIR = STORAGE_SERVICE_SYS_CAP_TAG + 6
    E_NOT_SUPPORT = STORAGE_SERVICE_SYS_CAP_TAG + 7
    E_SYS_KERNEL_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 8
    E_WRITE_PARCEL_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 9
    E_WRITE_REPLY_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 10
    E_WRITE_DESCRIPTOR_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 11
    E_SA_IS_NULLPTR = STORAGE_SERVICE_SYS_CAP_TAG + 12
    E_REMOTE_IS_NULLPTR = STORAGE_SERVICE_SYS_CAP_TAG + 13
    E_SERVICE_IS_NULLPTR = STORAGE_SERVICE_SYS_CAP_TAG + 14
    E_DEATH_RECIPIENT_IS_NULLPTR = STORAGE_SERVICE_SYS_CAP_TAG + 16
    E_SYS_APP_PERMISSION_DENIED = STORAGE_SERVICE_SYS_CAP_TAG + 25

    E_SET_POLICY = STORAGE_SERVICE_SYS_CAP_TAG + 201
    E_USERID_RANGE = STORAGE_SERVICE_SYS_CAP_TAG + 202

    E_BUNDLEMGR_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1201
    E_MEDIALIBRARY_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1202
    E_GET_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1223
    E_SET_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1224
    E_GET_ALL_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1226
    E_GET_INODE_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1229
    E_GET_SYSTEM_DATA_SIZE_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1232
    E_GET_BUNDLE_INODES_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 1233

    E_VOL_STATE = STORAGE_SERVICE_SYS_CAP_TAG + 1701
    E_VOL_MOUNT_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 1702
    E_VOL_UMOUNT_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 1703
    E_UMOUNT_BUSY = STORAGE_SERVICE_SYS_CAP_TAG + 1704
    E_NO_CHILD = STORAGE_SERVICE_SYS_CAP_TAG + 1705


class DiskManagerJsErr(IntEnum):
    """Business error codes reported to application callers."""

    E_PERMISSION = 201
    E_PERMISSION_SYS = 202
    E_PARAMS = 401
    E_DEVICENOTSUPPORT = 801
    E_OSNOTSUPPORT = 901
    E_IPCSS = STORAGE_SERVICE_SYS_CAP_TAG + 1
    E_SUPPORTEDFS = STORAGE_SERVICE_SYS_CAP_TAG + 2
    E_MOUNT_ERR = STORAGE_SERVICE_SYS_CAP_TAG + 3
    E_UNMOUNT = STORAGE_SERVICE_SYS_CAP_TAG + 4
    E_VOLUMESTATE = STORAGE_SERVICE_SYS_CAP_TAG + 5
    E_PREPARE = STORAGE_SERVICE_SYS_CAP_TAG + 6
    E_DELETE = STORAGE_SERVICE_SYS_CAP_TAG + 7
    E_NOOBJECT = STORAGE_SERVICE_SYS_CAP_TAG + 8
    E_OUTOFRANGE = STORAGE_SERVICE_SYS_CAP_TAG + 9
    E_JS_PARAMS_INVALID = STORAGE_SERVICE_SYS_CAP_TAG + 10
    E_JS_SET_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 11
    E_JS_GET_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 12
    E_JS_GET_ALL_EXT_BUNDLE_STATS_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 13
    E_JS_RETRY_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 14
    E_JS_GET_INODE_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 16
    E_JS_GET_BUNDLE_INODES_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 17
    E_JS_GET_SYSTEM_DATA_SIZE_ERROR = STORAGE_SERVICE_SYS_CAP_TAG + 18


# Optical disc and burning extension codes.
E_STORAGE_JS_EXT_DISC_NOT_ERASABLE = STORAGE_SERVICE_SYS_CAP_TAG + 23
E_STORAGE_JS_EXT_EMPTY_DISC = STORAGE_SERVICE_SYS_CAP_TAG + 24
E_STORAGE_JS_EXT_ISO_WRITE_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 25
E_STORAGE_JS_EXT_BURN_NOSPACE = STORAGE_SERVICE_SYS_CAP_TAG + 26
E_STORAGE_JS_EXT_BURN_SRC_NOTFOUND = STORAGE_SERVICE_SYS_CAP_TAG + 27
E_STORAGE_JS_EXT_BURN_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 28
E_STORAGE_JS_EXT_NO_ONGOING_OP = STORAGE_SERVICE_SYS_CAP_TAG + 29
E_STORAGE_JS_EXT_VERIFY_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 30
E_STORAGE_JS_EXT_VERIFY_MISMATCH = STORAGE_SERVICE_SYS_CAP_TAG + 31

# Partition management extension codes.
E_PARTITION_TABLE_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 21
E_CREATE_PARTITION_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 22
E_DELETE_PARTITION_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 23
E_FORMAT_PARTITION_FAILED = STORAGE_SERVICE_SYS_CAP_TAG + 25


class DiskManagerError(Exception):
    """Raised when a disk manager operation fails with an error code."""

    def __init__(self, code, message=""):
        self.code = int(code)
        self.message = message
        text = f"[{self.code}] {message}" if message else f"[{self.code}]"
        super().__init__(text)