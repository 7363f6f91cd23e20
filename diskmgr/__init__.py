"""Disk, volume and partition records, their parcel codec, error codes, and a disk manager client."""

__version__ = "0.1.0"
__all__ = ["errors", "parcel", "disk", "volume", "partition", "client"]