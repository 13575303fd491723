"""Hex rendering for diagnostic output."""


def bytes_to_hex(data: bytes) -> str:
    """Upper-case hex, one space after every byte: b"\\x0a\\xff" → "0A FF "."""
    return "".join(f"{b:02X} " for b in data)
