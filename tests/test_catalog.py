import pytest

from pkgjtool.catalog import (
    BgdlType,
    ContentType,
    Mode,
    mode_partition,
    mode_to_bgdl_type,
    mode_to_type,
    theme_is_installed,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        (Mode.GAMES, ContentType.GAME),
        (Mode.DLCS, ContentType.DLC),
        (Mode.PSM_GAMES, ContentType.PSM_GAME),
        (Mode.PSX_GAMES, ContentType.PSX_GAME),
        (Mode.PSP_GAMES, ContentType.PSP_GAME),
        (Mode.PSP_DLCS, ContentType.PSP_DLC),
    ],
)
def test_mode_to_type(mode, expected):
    assert mode_to_type(mode) is expected


@pytest.mark.parametrize("mode", [Mode.DEMOS, Mode.THEMES])
def test_mode_to_type_unsupported(mode):
    with pytest.raises(ValueError, match="unsupported mode"):
        mode_to_type(mode)


def test_mode_to_type_unknown():
    with pytest.raises(ValueError, match="unknown mode"):
        mode_to_type("games")


@pytest.mark.parametrize(
    "mode, expected",
    [
        (Mode.GAMES, BgdlType.GAME),
        (Mode.DEMOS, BgdlType.GAME),
        (Mode.DLCS, BgdlType.DLC),
        (Mode.THEMES, BgdlType.THEME),
    ],
)
def test_mode_to_bgdl_type(mode, expected):
    assert mode_to_bgdl_type(mode) is expected


@pytest.mark.parametrize(
    "mode", [Mode.PSM_GAMES, Mode.PSX_GAMES, Mode.PSP_GAMES, Mode.PSP_DLCS]
)
def test_mode_to_bgdl_type_unsupported(mode):
    with pytest.raises(ValueError, match="unsupported bgdl mode"):
        mode_to_bgdl_type(mode)


@pytest.mark.parametrize("mode", [Mode.PSP_GAMES, Mode.PSP_DLCS, Mode.PSX_GAMES])
def test_mode_partition_psp_psx(mode):
    assert mode_partition(mode, "ux0:", "uma0:") == "uma0:"


@pytest.mark.parametrize(
    "mode", [Mode.GAMES, Mode.DLCS, Mode.DEMOS, Mode.THEMES, Mode.PSM_GAMES]
)
def test_mode_partition_vita(mode):
    assert mode_partition(mode, "ux0:", "uma0:") == "ux0:"


def test_theme_is_installed_found():
    content_id = "UP0000-PCSE00000_00-THEMEXXXXXXXXXXX"
    installed = {"PCSE00000-THEMEXXXXXXXXXXX"}
    assert theme_is_installed(content_id, installed) is True


def test_theme_is_installed_missing():
    content_id = "UP0000-PCSE00000_00-THEMEXXXXXXXXXXX"
    assert theme_is_installed(content_id, {"PCSE00001-THEMEXXXXXXXXXXX"}) is False
    assert theme_is_installed(content_id, set()) is False


def test_theme_is_installed_full_id_not_matched():
    content_id = "UP0000-PCSE00000_00-THEMEXXXXXXXXXXX"
    assert theme_is_installed(content_id, {content_id}) is False


def test_theme_is_installed_short_id():
    short = "UP0000-PCSE00000_0"
    assert len(short) == 18
    assert theme_is_installed(short, {"", "PCSE00000", short}) is False


def test_theme_is_installed_minimum_length():
    content_id = "UP0000-PCSE00000_00"
    assert theme_is_installed(content_id, {"PCSE00000"}) is True