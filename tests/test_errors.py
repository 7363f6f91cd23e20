import pytest

from diskmgr.errors import (
    E_DELETE_PARTITION_FAILED,
    E_STORAGE_JS_EXT_DISC_NOT_ERASABLE,
    STORAGE_SERVICE_SYS_CAP_TAG,
    DiskManagerErrNo,
    DiskManagerError,
    DiskManagerJsErr,
    DiskManagerNativeErr,
)


def test_ok_codes_are_zero():
    assert DiskManagerErrNo(0) is DiskManagerErrNo.E_OK
    assert DiskManagerNativeErr(0) is DiskManagerNativeErr.E_OK


def test_generic_error_is_minus_one():
    assert DiskManagerErrNo(-1) is DiskManagerErrNo.DISK_MGR_ERR


def test_shared_codes_agree_between_tables():
    assert DiskManagerNativeErr(DiskManagerErrNo.E_PARAMS_INVALID) is DiskManagerNativeErr.E_PARAMS_INVALID
    assert DiskManagerNativeErr(DiskManagerErrNo.E_NON_EXIST) is DiskManagerNativeErr.E_NON_EXIST
    assert DiskManagerNativeErr(DiskManagerErrNo.E_VOL_STATE) is DiskManagerNativeErr.E_VOL_STATE
    assert DiskManagerNativeErr(DiskManagerErrNo.E_NO_CHILD) is DiskManagerNativeErr.E_NO_CHILD


def test_native_codes_are_offset_from_tag():
    assert DiskManagerNativeErr(STORAGE_SERVICE_SYS_CAP_TAG + 1) is DiskManagerNativeErr.E_PERMISSION_DENIED
    assert DiskManagerNativeErr(STORAGE_SERVICE_SYS_CAP_TAG + 1705) is DiskManagerNativeErr.E_NO_CHILD


def test_js_codes():
    assert DiskManagerJsErr(401) is DiskManagerJsErr.E_PARAMS
    assert DiskManagerJsErr(STORAGE_SERVICE_SYS_CAP_TAG + 1) is DiskManagerJsErr.E_IPCSS


def test_lookup_by_value():
    assert DiskManagerErrNo(21) is DiskManagerErrNo.E_VOLUME_NOT_FOUND
    with pytest.raises(ValueError):
        DiskManagerErrNo(999)


def test_extension_codes_share_a_value():
    err = DiskManagerError(E_DELETE_PARTITION_FAILED, "delete failed")
    assert err.code == E_STORAGE_JS_EXT_DISC_NOT_ERASABLE
    assert err.code == STORAGE_SERVICE_SYS_CAP_TAG + 23


def test_error_carries_code_and_message():
    err = DiskManagerError(DiskManagerErrNo.E_DISK_NOT_FOUND, "no such disk")
    assert err.code == DiskManagerErrNo.E_DISK_NOT_FOUND
    assert err.message == "no such disk"
    assert "no such disk" in str(err)


def test_error_with_native_code():
    err = DiskManagerError(DiskManagerNativeErr.E_SA_IS_NULLPTR, "no registry")
    assert err.code == STORAGE_SERVICE_SYS_CAP_TAG + 12
    assert err.message == "no registry"