"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, control keys, and the CSI/SS3 forms terminals
use for Home/End, paging, and their Ctrl-modified variants.
"""

from __future__ import annotations

import os
import select

from . import keys

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_MAX_CSI_LENGTH = 16

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": keys.CTRL_C,
    b"\x07": keys.CTRL_G,
    b"\x0c": keys.CTRL_L,
    b"\x14": keys.CTRL_T,
    b"\t": keys.TAB,
    b"\x08": keys.BACKSPACE,
    b"\x7f": keys.BACKSPACE,
    b"\r": keys.ENTER_CR,
    b"\n": keys.ENTER_LF,
}

# (parameter bytes, final byte) of ``ESC [ ...`` sequences.
_CSI_KEYS: dict[tuple[bytes, bytes], str] = {
    (b"", b"A"): keys.UP,
    (b"", b"B"): keys.DOWN,
    (b"", b"C"): keys.RIGHT,
    (b"", b"D"): keys.LEFT,
    (b"", b"H"): keys.HOME,
    (b"", b"F"): keys.END,
    (b"1", b"~"): keys.HOME,
    (b"7", b"~"): keys.HOME,
    (b"4", b"~"): keys.END,
    (b"8", b"~"): keys.END,
    (b"5", b"~"): keys.PAGE_UP,
    (b"6", b"~"): keys.PAGE_DOWN,
    (b"1;5", b"H"): keys.CTRL_HOME,
    (b"1;5", b"F"): keys.CTRL_END,
    (b"7", b"^"): keys.CTRL_HOME,
    (b"8", b"^"): keys.CTRL_END,
}

# Final byte of ``ESC O x`` (application cursor mode) sequences.
_SS3_KEYS: dict[bytes, str] = {
    b"A": keys.UP,
    b"B": keys.DOWN,
    b"C": keys.RIGHT,
    b"D": keys.LEFT,
    b"H": keys.HOME,
    b"F": keys.END,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        expected = 3
    elif first >= 0xE0:
        expected = 2
    elif first >= 0xC0:
        expected = 1
    else:
        return lead
    data = lead
    for _ in range(expected):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


def _read_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    params = b""
    while len(params) < _MAX_CSI_LENGTH:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return keys.ESC
        if 0x40 <= part[0] <= 0x7E and part != b"[":
            return _CSI_KEYS.get((params, part), keys.UNKNOWN)
        params += part
    return keys.UNKNOWN


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; returns ``""`` on timeout or EOF."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return keys.ESC
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return keys.ESC
        return _SS3_KEYS.get(final, keys.UNKNOWN)
    _PENDING_BYTES.append(seq)
    return keys.ESC
