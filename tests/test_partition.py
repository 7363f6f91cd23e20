import pytest

from diskmgr.parcel import Parcel, ParcelError
from diskmgr.partition import (
    PARTITION_COUNT_MAX,
    FormatParams,
    PartitionInfo,
    PartitionParams,
    PartitionTableInfo,
)


def _round_trip(obj):
    parcel = Parcel()
    obj.marshal(parcel)
    reader = Parcel(parcel.to_bytes())
    result = type(obj).unmarshal(reader)
    return result, reader, parcel


def _sample_info(num=1):
    return PartitionInfo(num, "disk-8-0", 2048, 4095, 1048576, "vfat")


def test_table_defaults_from_source():
    table = PartitionTableInfo()
    assert table.sector_size == 512
    assert table.align_sector == 2048
    assert table.partitions == []
    assert table.last_usable_sector == 0


def test_format_params_default_quick():
    assert FormatParams().quick_format is True


def test_partition_info_round_trip():
    info = _sample_info()
    result, reader, parcel = _round_trip(info)
    assert result == info
    reader.rewind(len(parcel))


def test_partition_info_field_order():
    parcel = Parcel()
    _sample_info(3).marshal(parcel)
    parcel.rewind(0)
    assert parcel.read_int32() == 3
    assert parcel.read_string() == "disk-8-0"
    assert parcel.read_int64() == 2048
    assert parcel.read_int64() == 4095
    assert parcel.read_int64() == 1048576
    assert parcel.read_string() == "vfat"


def test_partition_table_round_trip():
    table = PartitionTableInfo(
        disk_id="disk-8-0",
        table_type="gpt",
        partition_count=2,
        total_sector=1 << 33,
        sector_size=4096,
        align_sector=256,
        partitions=[_sample_info(1), _sample_info(2)],
    )
    result, _, _ = _round_trip(table)
    assert result == table
    assert [p.partition_num for p in result.partitions] == [1, 2]


def test_last_usable_sector_not_serialised():
    table = PartitionTableInfo(disk_id="d", table_type="mbr", last_usable_sector=999)
    result, _, _ = _round_trip(table)
    assert result.last_usable_sector == 0
    assert result.disk_id == "d"
    assert result.table_type == "mbr"


def test_table_marshal_accepts_max_partitions():
    table = PartitionTableInfo(partitions=[_sample_info(i) for i in range(PARTITION_COUNT_MAX)])
    result, _, _ = _round_trip(table)
    assert len(result.partitions) == PARTITION_COUNT_MAX


def test_table_marshal_rejects_too_many_partitions():
    table = PartitionTableInfo(partitions=[_sample_info(i) for i in range(PARTITION_COUNT_MAX + 1)])
    with pytest.raises(ParcelError):
        table.marshal(Parcel())


def test_table_unmarshal_rejects_too_many_partitions():
    parcel = Parcel()
    parcel.write_string("disk")
    parcel.write_string("gpt")
    parcel.write_int32(0)
    parcel.write_int64(0)
    parcel.write_int32(512)
    parcel.write_int32(2048)
    parcel.write_uint32(PARTITION_COUNT_MAX + 1)
    parcel.rewind(0)
    with pytest.raises(ParcelError):
        PartitionTableInfo.unmarshal(parcel)


def test_table_unmarshal_truncated_partition():
    table = PartitionTableInfo(partitions=[_sample_info()])
    parcel = Parcel()
    table.marshal(parcel)
    truncated = Parcel(parcel.to_bytes()[:-4])
    with pytest.raises(ParcelError):
        PartitionTableInfo.unmarshal(truncated)


def test_partition_params_round_trip():
    params = PartitionParams(2, 4096, 8191, "0700")
    result, _, _ = _round_trip(params)
    assert result == params


def test_partition_params_field_order():
    parcel = Parcel()
    PartitionParams(5, 10, 20, "ef00").marshal(parcel)
    parcel.rewind(0)
    assert parcel.read_int32() == 5
    assert parcel.read_int64() == 10
    assert parcel.read_int64() == 20
    assert parcel.read_string() == "ef00"


@pytest.mark.parametrize("quick", [True, False])
def test_format_params_round_trip(quick):
    params = FormatParams("exfat", quick, "MYDISK")
    result, _, _ = _round_trip(params)
    assert result == params
    assert result.quick_format is quick


def test_format_params_truncated():
    parcel = Parcel()
    parcel.write_string("ext4")
    parcel.rewind(0)
    with pytest.raises(ParcelError):
        FormatParams.unmarshal(parcel)


def test_partition_info_rejects_out_of_range_num():
    info = PartitionInfo(partition_num=1 << 31)
    with pytest.raises(ParcelError):
        info.marshal(Parcel())