import string

import pytest

from razel.codes import Key, MouseButton


def test_letter_a_code():
    assert Key(65) is Key.A


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_letters_match_ascii(letter):
    assert Key(ord(letter)) is Key[letter]
    assert Key(ord(letter)).name == letter


@pytest.mark.parametrize("digit", list(string.digits))
def test_digits_match_ascii(digit):
    assert Key(ord(digit)) is Key[f"D{digit}"]
    assert Key(ord(digit)).name == f"D{digit}"


def test_function_keys_are_contiguous():
    names = [Key(value).name for value in range(Key.F1, Key.F25 + 1)]
    assert names == [f"F{n}" for n in range(1, 26)]


def test_keypad_digits_are_contiguous():
    names = [Key(value).name for value in range(Key.KP_0, Key.KP_9 + 1)]
    assert names == [f"KP_{n}" for n in range(10)]


def test_last_key_is_menu():
    assert Key(348) is Key.LAST
    assert Key(348) is Key.MENU
    assert max(Key) is Key.LAST


def test_space_is_printable():
    assert Key(ord(" ")) is Key.SPACE
    assert chr(Key.SPACE) == " "


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST
    assert MouseButton.LEFT is MouseButton.BUTTON_1
    assert MouseButton.LAST is MouseButton.BUTTON_8


@pytest.mark.parametrize("number", range(1, 9))
def test_mouse_buttons_start_at_zero_and_are_contiguous(number):
    button = MouseButton(number - 1)
    assert button is MouseButton[f"BUTTON_{number}"]
    assert int(button) == number - 1


def test_unknown_mouse_button_is_rejected():
    with pytest.raises(ValueError):
        MouseButton(8)