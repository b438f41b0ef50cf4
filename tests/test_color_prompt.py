from famp.bits import text_attribute, text_value
from famp.color_prompt import clear_screen, read_color
from famp.colors import Color
from famp.keyboard import Keyboard, Scancode
from famp.screen import TextScreen


def _codes(text):
    codes = []
    for ch in text:
        if ch == " ":
            codes.append(Scancode.SPACE)
        elif ch == "\n":
            codes.append(Scancode.ENTER)
        elif ch == "1":
            codes.append(Scancode.ONE)
        elif ch == "2":
            codes.append(Scancode.TWO)
        elif ch == "3":
            codes.append(Scancode.THREE)
        else:
            codes.append(Scancode[ch.upper()])
    return codes


def test_read_color_valid_name():
    screen = TextScreen()
    assert read_color(Keyboard(_codes("blue\n")), screen) is Color.BLUE
    assert screen.row_text(0).startswith("blue")


def test_read_color_two_word_name():
    assert read_color(Keyboard(_codes("light grey\n")), TextScreen()) is Color.LIGHT_GREY


def test_read_color_retries_after_invalid_name():
    screen = TextScreen()
    result = read_color(Keyboard(_codes("pink\nred\n")), screen)
    assert result is Color.RED
    assert screen.row_text(1).startswith("Oops.. I don't thinks `pink`")


def test_distinct_colors_fill_without_prompting():
    screen = TextScreen()
    result = clear_screen(Keyboard([]), screen, Color.BLUE, Color.WHITE)
    assert result == text_attribute(Color.BLUE, Color.WHITE)
    assert screen.default_color == result
    assert set(screen.cells) == {text_value(ord(" "), (result >> 4) & 0x0F, result & 0x0F)}
    assert (screen.cursor.x, screen.cursor.y) == (0, 0)


def test_clash_fixed_by_new_foreground():
    screen = TextScreen()
    keyboard = Keyboard(_codes("1yellow\n"))
    result = clear_screen(keyboard, screen, Color.BLUE, Color.BLUE)
    assert result == text_attribute(Color.BLUE, Color.YELLOW)
    assert screen.default_color == result


def test_clash_fixed_by_new_background():
    screen = TextScreen()
    keyboard = Keyboard(_codes("2green\n"))
    result = clear_screen(keyboard, screen, Color.BLUE, Color.BLUE)
    assert result == text_attribute(Color.GREEN, Color.BLUE)


def test_clash_kept_on_purpose():
    screen = TextScreen()
    result = clear_screen(Keyboard(_codes("3")), screen, Color.RED, Color.RED)
    assert result == text_attribute(Color.RED, Color.RED)
    assert set(screen.cells) == {text_value(ord(" "), 0, 0)}


def test_repeated_clash_accepting_white_background():
    screen = TextScreen()
    keyboard = Keyboard(_codes("1blue\ny"))
    result = clear_screen(keyboard, screen, Color.BLUE, Color.BLUE)
    assert result == text_attribute(Color.BLACK, Color.WHITE)


def test_repeated_clash_declined_starts_over():
    screen = TextScreen()
    keyboard = Keyboard(_codes("1blue\nn3"))
    result = clear_screen(keyboard, screen, Color.BLUE, Color.BLUE)
    assert result == text_attribute(Color.BLUE, Color.BLUE)
    assert screen.default_color == result