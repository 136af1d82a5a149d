"""DLNA.ORG_FLAGS capability bits.

The flags field of the content-features header is a 32-bit value whose
upper bits advertise transport capabilities. Only the bits named here are
ever emitted; the low 24 bits of the wire value are reserved zeros.
"""

from __future__ import annotations

from enum import IntFlag


class DlnaFlag(IntFlag):
    """Named DLNA.ORG_FLAGS bits."""

    NONE = 0
    SENDER_PACED = 1 << 31
    LSOP_TIME_BASED_SEEK = 1 << 30
    LSOP_BYTE_BASED_SEEK = 1 << 29
    PLAYCONTAINER = 1 << 28
    S0_INCREASING = 1 << 27
    SN_INCREASING = 1 << 26
    RTSP_PAUSE = 1 << 25
    STREAMING_TRANSFER_MODE = 1 << 24
    INTERACTIVE_TRANSFER_MODE = 1 << 23
    BACKGROUND_TRANSFER_MODE = 1 << 22
    CONNECTION_STALLING = 1 << 21
    DLNA_VERSION_15 = 1 << 20


DEFAULT_FLAGS = (
    DlnaFlag.STREAMING_TRANSFER_MODE
    | DlnaFlag.CONNECTION_STALLING
    | DlnaFlag.DLNA_VERSION_15
)

# Lowercase names accepted in profile files, e.g. "connection_stalling"
FLAG_NAMES: dict[str, DlnaFlag] = {
    member.name.casefold(): member
    for member in DlnaFlag
    if member is not DlnaFlag.NONE
}


def flags_from_names(names: list[str] | tuple[str, ...]) -> DlnaFlag:
    """Combine flag names into a DlnaFlag value.

    Args:
        names: Flag names, case-insensitive (e.g. "streaming_transfer_mode").

    Returns:
        Bitwise OR of the named flags.

    Raises:
        ValueError: If a name is not a known flag.
    """
    value = DlnaFlag.NONE
    for name in names:
        member = FLAG_NAMES.get(name.casefold())
        if member is None:
            raise ValueError(
                f"Unknown DLNA flag '{name}'. "
                f"Valid flags are: {', '.join(sorted(FLAG_NAMES))}"
            )
        value |= member
    return value


def flag_names(flags: DlnaFlag) -> list[str]:
    """Return the lowercase names of the bits set in ``flags``, highest first."""
    return [name for name, member in FLAG_NAMES.items() if member & flags]


def format_flags(flags: DlnaFlag) -> str:
    """Render flags as unsigned 32-bit lowercase hex without zero padding."""
    return format(int(flags) & 0xFFFFFFFF, "x")
