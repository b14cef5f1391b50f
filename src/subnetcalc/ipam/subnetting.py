# src/subnetcalc/ipam/subnetting.py

from __future__ import annotations
import ipaddress
from dataclasses import dataclass

ALL_ONES = 0xFFFFFFFF


class AddressParseError(ValueError):
    """Raised when a buffer is not a plain dotted-decimal IPv4 literal."""

    def __init__(self, field: str, text: str, reason: str):
        self.field = field
        self.text = text
        self.reason = reason
        super().__init__(f"{field}: {reason}")


@dataclass(frozen=True)
class SubnetInfo:
    address: ipaddress.IPv4Address
    mask: ipaddress.IPv4Address
    network: ipaddress.IPv4Address
    broadcast: ipaddress.IPv4Address
    ones: int
    subnet_count: int
    host_count: int
    contiguous: bool


def parse_ipv4(text: str, *, field: str = "address") -> ipaddress.IPv4Address:
    # ipaddress rejects whitespace, leading zeros and out-of-range octets
    if not text:
        raise AddressParseError(field, text, "nothing entered")
    try:
        return ipaddress.IPv4Address(text)
    except ipaddress.AddressValueError as e:
        raise AddressParseError(field, text, str(e)) from e


def network_address(ip: ipaddress.IPv4Address, mask: ipaddress.IPv4Address) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(bytes(a & m for a, m in zip(ip.packed, mask.packed)))


def broadcast_address(ip: ipaddress.IPv4Address, mask: ipaddress.IPv4Address) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(bytes(a | (~m & 0xFF) for a, m in zip(ip.packed, mask.packed)))


def ones_count(mask: ipaddress.IPv4Address) -> int:
    """Set bits across all four octets. Does not check contiguity."""
    return sum(bin(octet).count("1") for octet in mask.packed)


def is_contiguous(mask: ipaddress.IPv4Address) -> bool:
    value = int(mask)
    inverted = ~value & ALL_ONES
    # host part must be 0...01...1
    return (inverted & (inverted + 1)) == 0


def subnet_count(mask: ipaddress.IPv4Address) -> int:
    """
    2 ** (32 - ones). Python ints don't overflow, so a /0 mask gives 2 ** 32
    rather than wrapping.
    """
    return 1 << (32 - ones_count(mask))


def host_count(mask: ipaddress.IPv4Address) -> int:
    """
    Usable hosts per subnet: block size minus network and broadcast.
    /31 -> 2 (RFC 3021 point-to-point), /32 -> 1, same as IPv4Network.hosts().
    """
    ones = ones_count(mask)
    if ones == 32:
        return 1
    if ones == 31:
        return 2
    return subnet_count(mask) - 2


def describe(ip: ipaddress.IPv4Address, mask: ipaddress.IPv4Address) -> SubnetInfo:
    return SubnetInfo(
        address=ip,
        mask=mask,
        network=network_address(ip, mask),
        broadcast=broadcast_address(ip, mask),
        ones=ones_count(mask),
        subnet_count=subnet_count(mask),
        host_count=host_count(mask),
        contiguous=is_contiguous(mask),
    )


def describe_text(ip_text: str, mask_text: str) -> SubnetInfo:
    ip = parse_ipv4(ip_text, field="ip")
    mask = parse_ipv4(mask_text, field="subnet")
    return describe(ip, mask)
