"""Catalogue modes and how they map to content kinds and install locations."""

from __future__ import annotations

import enum
from typing import Collection

__all__ = [
    "Mode",
    "ContentType",
    "BgdlType",
    "mode_to_type",
    "mode_to_bgdl_type",
    "mode_partition",
    "theme_is_installed",
]

_THEME_CONTENT_MIN_LENGTH = 19


class Mode(enum.Enum):
    """Which list of titles is being browsed."""

    GAMES = enum.auto()
    DLCS = enum.auto()
    DEMOS = enum.auto()
    THEMES = enum.auto()
    PSM_GAMES = enum.auto()
    PSX_GAMES = enum.auto()
    PSP_GAMES = enum.auto()
    PSP_DLCS = enum.auto()


class ContentType(enum.Enum):
    """Kind of content handled by the built-in downloader."""

    GAME = enum.auto()
    DLC = enum.auto()
    PSM_GAME = enum.auto()
    PSX_GAME = enum.auto()
    PSP_GAME = enum.auto()
    PSP_DLC = enum.auto()


class BgdlType(enum.Enum):
    """Kind of content queued for background download by the system."""

    GAME = enum.auto()
    DLC = enum.auto()
    THEME = enum.auto()


_MODE_TO_TYPE = {
    Mode.GAMES: ContentType.GAME,
    Mode.DLCS: ContentType.DLC,
    Mode.PSM_GAMES: ContentType.PSM_GAME,
    Mode.PSX_GAMES: ContentType.PSX_GAME,
    Mode.PSP_GAMES: ContentType.PSP_GAME,
    Mode.PSP_DLCS: ContentType.PSP_DLC,
}

_MODE_TO_BGDL = {
    Mode.GAMES: BgdlType.GAME,
    Mode.DEMOS: BgdlType.GAME,
    Mode.DLCS: BgdlType.DLC,
    Mode.THEMES: BgdlType.THEME,
}

_PSP_PSX_MODES = frozenset({Mode.PSP_GAMES, Mode.PSP_DLCS, Mode.PSX_GAMES})


def mode_to_type(mode: Mode) -> ContentType:
    """Return the downloader content type for ``mode``.

    Demos and themes are only installed through background downloads and
    raise ValueError.
    """
    if not isinstance(mode, Mode):
        raise ValueError(f"unknown mode {mode!r}")
    try:
        return _MODE_TO_TYPE[mode]
    except KeyError:
        raise ValueError(f"unsupported mode {mode.name}") from None


def mode_to_bgdl_type(mode: Mode) -> BgdlType:
    """Return the background download type for ``mode``; raises ValueError if there is none."""
    try:
        return _MODE_TO_BGDL[mode]
    except KeyError:
        name = mode.name if isinstance(mode, Mode) else repr(mode)
        raise ValueError(f"unsupported bgdl mode {name}") from None


def mode_partition(mode: Mode, psv_location: str, psp_psx_location: str) -> str:
    """Return the partition content of ``mode`` is installed to."""
    return psp_psx_location if mode in _PSP_PSX_MODES else psv_location


def theme_is_installed(content_id: str, installed_themes: Collection[str]) -> bool:
    """Tell whether the theme with ``content_id`` is among ``installed_themes``.

    Installed themes are named by the content id without its seven character
    prefix and without the three characters following the title id.
    """
    if len(content_id) < _THEME_CONTENT_MIN_LENGTH:
        return False
    key = content_id[7:16] + content_id[19:]
    return key in installed_themes