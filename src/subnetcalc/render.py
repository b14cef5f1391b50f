# src/subnetcalc/render.py
from __future__ import annotations

from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from .app import ApplicationState, InputMode

PLACEHOLDER_ADDRESS = "0.0.0.0"
PLACEHOLDER_COUNT = 0

INPUT_TITLES = {
    InputMode.EDITING_IP: "Enter IP Address:",
    InputMode.EDITING_SUBNET: "Enter Subnet Mask:",
    InputMode.IDLE: "Press 'i' to Input IP, 's' for Subnet",
}
RESULT_TITLE = "Subnet Calculation"
STATUS_TITLE = "Status"


def input_text(state: ApplicationState) -> str:
    return f"IP: {state.ip_text}\nSubnet: {state.subnet_text}"


def result_text(state: ApplicationState) -> str:
    # absent results are shown as placeholders, not hidden
    network = state.network_address if state.network_address is not None else PLACEHOLDER_ADDRESS
    broadcast = state.broadcast_address if state.broadcast_address is not None else PLACEHOLDER_ADDRESS
    subnets = state.subnet_count if state.subnet_count is not None else PLACEHOLDER_COUNT
    hosts = state.host_count if state.host_count is not None else PLACEHOLDER_COUNT
    return (
        f"Network Address: {network}\n"
        f"Broadcast Address: {broadcast}\n"
        f"Subnet Count: {subnets}\n"
        f"Host Count: {hosts}"
    )


def render(state: ApplicationState) -> Layout:
    """One full frame: input panel, results panel, status region."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(name="input", ratio=30),
        Layout(name="result", ratio=30),
        Layout(name="status", ratio=40),
    )
    layout["input"].update(
        Panel(
            Text(input_text(state)),
            title=INPUT_TITLES[state.mode],
            title_align="left",
            style="yellow",
        )
    )
    layout["result"].update(
        Panel(Text(result_text(state)), title=RESULT_TITLE, title_align="left")
    )
    if state.status:
        layout["status"].update(
            Panel(Text(state.status), title=STATUS_TITLE, title_align="left", style="red")
        )
    else:
        layout["status"].update(Text(""))
    return layout
