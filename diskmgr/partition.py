"""Partition tables and the parameters for creating and formatting partitions."""

from dataclasses import dataclass, field

from .parcel import ParcelError

PARTITION_COUNT_MAX = 256
DEFAULT_SECTOR_SIZE = 512
DEFAULT_ALIGN_SECTOR = 2048


@dataclass
class PartitionInfo:
    """One partition on a disk."""

    partition_num: int = 0
    disk_id: str = ""
    start_sector: int = 0
    end_sector: int = 0
    size_bytes: int = 0
    fs_type: str = ""

    def marshal(self, parcel):
        parcel.write_int32(self.partition_num)
        parcel.write_string(self.disk_id)
        parcel.write_int64(self.start_sector)
        parcel.write_int64(self.end_sector)
        parcel.write_int64(self.size_bytes)
        parcel.write_string(self.fs_type)

    @classmethod
    def unmarshal(cls, parcel):
        return cls(
            partition_num=parcel.read_int32(),
            disk_id=parcel.read_string(),
            start_sector=parcel.read_int64(),
            end_sector=parcel.read_int64(),
            size_bytes=parcel.read_int64(),
            fs_type=parcel.read_string(),
        )


@dataclass
class PartitionTableInfo:
    """The partition table of a disk and the partitions it lists.

    ``last_usable_sector`` is kept in process only and is not serialised.
    """

    disk_id: str = ""
    table_type: str = ""
    partition_count: int = 0
    total_sector: int = 0
    sector_size: int = DEFAULT_SECTOR_SIZE
    align_sector: int = DEFAULT_ALIGN_SECTOR
    last_usable_sector: int = 0
    partitions: list = field(default_factory=list)

    def marshal(self, parcel):
        parcel.write_string(self.disk_id)
        parcel.write_string(self.table_type)
        parcel.write_int32(self.partition_count)
        parcel.write_int64(self.total_sector)
        parcel.write_int32(self.sector_size)
        parcel.write_int32(self.align_sector)
        count = len(self.partitions)
        if count > PARTITION_COUNT_MAX:
            raise ParcelError(f"too many partitions: {count} > {PARTITION_COUNT_MAX}")
        parcel.write_uint32(count)
        for part in self.partitions:
            part.marshal(parcel)

    @classmethod
    def unmarshal(cls, parcel):
        table = cls(
            disk_id=parcel.read_string(),
            table_type=parcel.read_string(),
            partition_count=parcel.read_int32(),
            total_sector=parcel.read_int64(),
            sector_size=parcel.read_int32(),
            align_sector=parcel.read_int32(),
        )
        count = parcel.read_uint32()
        if count > PARTITION_COUNT_MAX:
            raise ParcelError(f"too many partitions: {count} > {PARTITION_COUNT_MAX}")
        table.partitions = [PartitionInfo.unmarshal(parcel) for _ in range(count)]
        return table


@dataclass
class PartitionParams:
    """Where and with which type code to create a partition."""

    partition_num: int = 0
    start_sector: int = 0
    end_sector: int = 0
    type_code: str = ""

    def marshal(self, parcel):
        parcel.write_int32(self.partition_num)
        parcel.write_int64(self.start_sector)
        parcel.write_int64(self.end_sector)
        parcel.write_string(self.type_code)

    @classmethod
    def unmarshal(cls, parcel):
        return cls(
            partition_num=parcel.read_int32(),
            start_sector=parcel.read_int64(),
            end_sector=parcel.read_int64(),
            type_code=parcel.read_string(),
        )


@dataclass
class FormatParams:
    """How to format a partition."""

    fs_type: str = ""
    quick_format: bool = True
    volume_name: str = ""

    def marshal(self, parcel):
        parcel.write_string(self.fs_type)
        parcel.write_bool(self.quick_format)
        parcel.write_string(self.volume_name)

    @classmethod
    def unmarshal(cls, parcel):
        return cls(
            fs_type=parcel.read_string(),
            quick_format=parcel.read_bool(),
            volume_name=parcel.read_string(),
        )