import pytest

from cubecast.keys import Key, MouseButton, key_code


def test_escape_codes_pinned():
    assert key_code(Key.ESC, "linux") == 65307
    assert key_code(Key.ESC, "darwin") == 53


def test_arrow_codes_pinned():
    assert key_code(Key.UP, "linux") == 65362
    assert key_code(Key.LEFT, "darwin") == 123


@pytest.mark.parametrize("platform", ["linux", "darwin"])
def test_codes_are_distinct(platform):
    codes = [key_code(key, platform) for key in Key]
    assert len(set(codes)) == len(list(Key))


def test_every_key_has_code_on_both_platforms():
    for key in Key:
        assert key_code(key, "linux") >= 0
        assert key_code(key, "darwin") >= 0
        assert key_code(key, "linux") != key_code(key, "darwin")


def test_name_lookup_matches_member():
    for key in Key:
        assert key_code(key.name, "linux") == key_code(key, "linux")
        assert key_code(key.name.lower(), "darwin") == key_code(key, "darwin")


def test_linux_variants_share_table():
    assert key_code(Key.L, "linux2") == key_code(Key.L, "linux")


def test_default_platform_is_valid():
    assert key_code(Key.ESC) in (key_code(Key.ESC, "linux"), key_code(Key.ESC, "darwin"))


def test_unknown_key_name():
    with pytest.raises(ValueError):
        key_code("space", "linux")


def test_mouse_buttons():
    assert MouseButton.WHEEL_UP == 4
    assert MouseButton.WHEEL_DOWN == 5
    assert MouseButton.BUTTON_2 is MouseButton.WHEEL_BUTTON
    assert MouseButton(1) is MouseButton.BUTTON