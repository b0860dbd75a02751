"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key names
(``"ArrowUp"``, ``"Enter"``, ``"Escape"``, ``"Backspace"`` or the typed
character). Arrow names match what :func:`decode_key_name` expects.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "ArrowUp",
    b"B": "ArrowDown",
    b"C": "ArrowRight",
    b"D": "ArrowLeft",
    b"H": "Home",
    b"F": "End",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_continuation_count(lead: int) -> int:
    if 0xC0 <= lead <= 0xDF:
        return 1
    if 0xE0 <= lead <= 0xEF:
        return 2
    if 0xF0 <= lead <= 0xF7:
        return 3
    return 0


def _decode_utf8(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``lead``."""
    data = lead
    for _ in range(_utf8_continuation_count(lead[0])):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if not 0x80 <= nxt[0] <= 0xBF:
            _PENDING_BYTES.append(nxt)
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key name; returns ``""`` on timeout or end of input."""
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

    if ch == b"\t":
        return "Tab"
    if ch in {b"\x08", b"\x7f"}:
        return "Backspace"
    if ch in {b"\r", b"\n"}:
        return "Enter"
    if ch == b"\x03":
        return "Ctrl+C"

    if ch != b"\x1b":
        return _decode_utf8(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "Escape"
    if seq not in {b"[", b"O"}:
        # Keep a following printable key for the next read.
        _PENDING_BYTES.append(seq)
        return "Escape"
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "Escape"
    return _CSI_FINAL_KEYS.get(final, "Escape")
