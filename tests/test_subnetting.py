"""Tests for the subnet arithmetic."""

import ipaddress

import pytest

from subnetcalc.ipam.subnetting import (
    AddressParseError,
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

A = ipaddress.IPv4Address

SAMPLE_ADDRESSES = ["192.168.1.10", "10.20.30.40", "0.0.0.0", "255.255.255.255", "172.16.254.3"]
SAMPLE_MASKS = [
    "0.0.0.0", "128.0.0.0", "255.0.0.0", "255.255.0.0", "255.255.240.0",
    "255.255.255.0", "255.255.255.252", "255.255.255.254", "255.255.255.255",
    "255.0.255.0",
]


class TestParse:
    """Tests for dotted-decimal parsing."""

    def test_valid_address(self):
        assert parse_ipv4("192.168.1.10") == A("192.168.1.10")

    @pytest.mark.parametrize(
        "text",
        ["", "192.168.1", "192.168.1.256", "192.168.1.10 ", " 192.168.1.10",
         "192.168.1.10x", "a.b.c.d", "192..1.10", "192.168.1.1.1", "192.168.01.1",
         "-1.0.0.0"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(AddressParseError):
            parse_ipv4(text)

    def test_error_carries_field_and_reason(self):
        with pytest.raises(AddressParseError) as exc:
            parse_ipv4("192.168.1", field="ip")
        assert exc.value.field == "ip"
        assert exc.value.text == "192.168.1"
        assert exc.value.reason

    def test_empty_text_reason(self):
        with pytest.raises(AddressParseError) as exc:
            parse_ipv4("", field="subnet")
        assert exc.value.reason == "nothing entered"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_ipv4("nope")


class TestAddresses:
    """Tests for network and broadcast addresses."""

    def test_network_address(self):
        assert network_address(A("192.168.1.10"), A("255.255.255.0")) == A("192.168.1.0")

    def test_broadcast_address(self):
        assert broadcast_address(A("192.168.1.10"), A("255.255.255.0")) == A("192.168.1.255")

    def test_network_with_all_ones_mask_is_identity(self):
        for ip in SAMPLE_ADDRESSES:
            assert network_address(A(ip), A("255.255.255.255")) == A(ip)

    def test_network_with_zero_mask_is_zero(self):
        for ip in SAMPLE_ADDRESSES:
            assert network_address(A(ip), A("0.0.0.0")) == A("0.0.0.0")

    @pytest.mark.parametrize("mask", SAMPLE_MASKS)
    @pytest.mark.parametrize("ip", SAMPLE_ADDRESSES)
    def test_network_keeps_only_mask_bits(self, ip, mask):
        n = int(network_address(A(ip), A(mask)))
        m = int(A(mask))
        assert n & ~m & 0xFFFFFFFF == 0
        assert n & m == int(A(ip)) & m

    @pytest.mark.parametrize("mask", SAMPLE_MASKS)
    @pytest.mark.parametrize("ip", SAMPLE_ADDRESSES)
    def test_broadcast_sets_host_bits(self, ip, mask):
        b = int(broadcast_address(A(ip), A(mask)))
        m = int(A(mask))
        assert b & m == int(A(ip)) & m
        assert b | m == 0xFFFFFFFF

    def test_non_contiguous_mask_is_applied_per_octet(self):
        ip, mask = A("10.20.30.40"), A("255.0.255.0")
        assert network_address(ip, mask) == A("10.0.30.0")
        assert broadcast_address(ip, mask) == A("10.255.30.255")

    def test_matches_ipaddress_network(self):
        net = ipaddress.IPv4Network("172.16.254.3/20", strict=False)
        ip, mask = A("172.16.254.3"), net.netmask
        assert network_address(ip, mask) == net.network_address
        assert broadcast_address(ip, mask) == net.broadcast_address


class TestCounts:
    """Tests for ones, subnet and host counts, including the mask edges."""

    @pytest.mark.parametrize(
        "mask,ones",
        [("0.0.0.0", 0), ("255.0.0.0", 8), ("255.255.255.0", 24),
         ("255.255.255.252", 30), ("255.255.255.255", 32), ("255.0.255.0", 16)],
    )
    def test_ones_count(self, mask, ones):
        assert ones_count(A(mask)) == ones

    def test_slash_24(self):
        assert subnet_count(A("255.255.255.0")) == 256
        assert host_count(A("255.255.255.0")) == 254

    def test_slash_30(self):
        assert subnet_count(A("255.255.255.252")) == 4
        assert host_count(A("255.255.255.252")) == 2

    def test_slash_0_widens_instead_of_overflowing(self):
        assert subnet_count(A("0.0.0.0")) == 2 ** 32
        assert host_count(A("0.0.0.0")) == 2 ** 32 - 2

    def test_slash_31_is_point_to_point(self):
        assert subnet_count(A("255.255.255.254")) == 2
        assert host_count(A("255.255.255.254")) == 2

    def test_slash_32_is_single_host(self):
        assert subnet_count(A("255.255.255.255")) == 1
        assert host_count(A("255.255.255.255")) == 1

    @pytest.mark.parametrize("prefix", range(0, 33))
    def test_host_count_matches_ipaddress(self, prefix):
        net = ipaddress.IPv4Network(f"0.0.0.0/{prefix}")
        assert subnet_count(net.netmask) == net.num_addresses
        expected = net.num_addresses - 2 if prefix <= 30 else net.num_addresses
        assert host_count(net.netmask) == expected

    @pytest.mark.parametrize("prefix", range(0, 33))
    def test_prefix_masks_are_contiguous(self, prefix):
        assert is_contiguous(ipaddress.IPv4Network(f"0.0.0.0/{prefix}").netmask)

    @pytest.mark.parametrize("mask", ["255.0.255.0", "0.0.0.255", "255.255.255.253"])
    def test_non_contiguous(self, mask):
        assert not is_contiguous(A(mask))


class TestDescribe:
    """Tests for computing everything in one go."""

    def test_describe(self):
        info = describe(A("192.168.1.10"), A("255.255.255.0"))
        assert info.network == A("192.168.1.0")
        assert info.broadcast == A("192.168.1.255")
        assert info.ones == 24
        assert info.subnet_count == 256
        assert info.host_count == 254
        assert info.contiguous is True

    def test_describe_text_reports_ip_field(self):
        with pytest.raises(AddressParseError) as exc:
            describe_text("192.168.1", "255.255.255.0")
        assert exc.value.field == "ip"

    def test_describe_text_reports_subnet_field(self):
        with pytest.raises(AddressParseError) as exc:
            describe_text("192.168.1.10", "255.255.255")
        assert exc.value.field == "subnet"

    def test_describe_is_deterministic(self):
        assert describe_text("10.1.2.3", "255.255.0.0") == describe_text("10.1.2.3", "255.255.0.0")
