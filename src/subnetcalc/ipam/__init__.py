from .subnetting import (
    AddressParseError,
    SubnetInfo,
    broadcast_address,
    describe,
    describe_text,
    host_count,
    is_contiguous,
    network_address,
    ones_count,
    parse_ipv4,
    subnet_count,
)

__all__ = [
    "AddressParseError", "SubnetInfo",
    "parse_ipv4", "describe", "describe_text",
    "network_address", "broadcast_address",
    "ones_count", "is_contiguous", "subnet_count", "host_count",
]
