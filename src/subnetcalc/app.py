# src/subnetcalc/app.py
from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .ipam.subnetting import AddressParseError, describe_text
from .keys import Key, KeyKind
from .logging import get_logger

log = get_logger()

QUIT_KEY = "q"
EDIT_IP_KEY = "i"
EDIT_SUBNET_KEY = "s"


class InputMode(Enum):
    EDITING_IP = "ip"
    EDITING_SUBNET = "subnet"
    IDLE = "idle"


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    field: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class ApplicationState:
    """
    Everything the screen shows. Results stay None until the first successful
    calculation and are always replaced together.
    """
    ip_text: str = ""
    subnet_text: str = ""
    mode: InputMode = InputMode.IDLE
    network_address: Optional[ipaddress.IPv4Address] = None
    broadcast_address: Optional[ipaddress.IPv4Address] = None
    subnet_count: Optional[int] = None
    host_count: Optional[int] = None
    status: Optional[str] = None

    @property
    def has_results(self) -> bool:
        return self.network_address is not None

    def _buffer_name(self) -> Optional[str]:
        if self.mode is InputMode.EDITING_IP:
            return "ip_text"
        if self.mode is InputMode.EDITING_SUBNET:
            return "subnet_text"
        return None

    def type_char(self, ch: str) -> None:
        name = self._buffer_name()
        if name is None:
            return
        setattr(self, name, getattr(self, name) + ch)

    def backspace(self) -> None:
        name = self._buffer_name()
        if name is None:
            return
        setattr(self, name, getattr(self, name)[:-1])

    def recalculate(self) -> ParseResult:
        try:
            info = describe_text(self.ip_text, self.subnet_text)
        except AddressParseError as e:
            log.debug(f"Not recalculating, {e.field} {e.text!r} rejected: {e.reason}")
            self.status = f"Invalid {'IP address' if e.field == 'ip' else 'subnet mask'}: {e.reason}"
            return ParseResult(ok=False, field=e.field, reason=e.reason)

        if not info.contiguous:
            log.warning(f"Mask {info.mask} is not contiguous; counts assume {info.ones} one-bits")

        self.network_address = info.network
        self.broadcast_address = info.broadcast
        self.subnet_count = info.subnet_count
        self.host_count = info.host_count
        self.status = None
        log.debug(
            f"{info.address} mask {info.mask} -> network {info.network}, "
            f"broadcast {info.broadcast}, subnets {info.subnet_count}, hosts {info.host_count}"
        )
        return ParseResult(ok=True)

    def handle_key(self, key: Key) -> bool:
        """Apply one key event. Returns False when the user asked to quit."""
        if key.kind is KeyKind.CHAR:
            if key.char == QUIT_KEY:
                return False
            if key.char == EDIT_IP_KEY:
                self.mode = InputMode.EDITING_IP
            elif key.char == EDIT_SUBNET_KEY:
                self.mode = InputMode.EDITING_SUBNET
            else:
                self.type_char(key.char)
        elif key.kind is KeyKind.BACKSPACE:
            self.backspace()
        elif key.kind is KeyKind.ENTER:
            self.recalculate()
            self.mode = InputMode.IDLE
        return True
