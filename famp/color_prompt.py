"""Interactive choice of screen colours when foreground and background clash."""

from __future__ import annotations

from famp.bits import text_attribute
from famp.colors import Color, color_from_name, color_label, itoa
from famp.keyboard import Keyboard
from famp.screen import TextScreen

_RETRY_REFERENCE = (
    "For reference, here is a list of all the available colors!(P.S you have to "
    "type the numbers out in lowercase)\n\t1. Black\n\t2. @bBlue@w\n\t3. @gGreen@w"
    "\n\t4. @cCyan@w\n\t5. @rRed@w\n\t6. @mMagenta@w\n\t7. @bBrown@w\n\t8. @lgLight "
    "Grey@w\n\t9. @dgDark Grey@w\n\t10. @lbLight Blue@w\n\t11. @lgLime Green@w\n\t12. "
    "@lcLight Cyan@w\n\t13. @lrLight Red@w\n\t14. @lmLight Magenta@w\n\t15. "
    "@yYellow@w\n\t16. White@w\n> "
)

_REFERENCE = (
    "For reference, here is a list of all the available colors!(P.S you have to "
    "type the numbers out in lowercase)\n\t1. Black\n\t2. @bBlue@w\n\t3. @gGreen@w"
    "\n\t4. @cCyan@w\n\t5. @rRed@w\n\t6. @mMagenta@w\n\t7. @brBrown@w\n\t8. @lgLight "
    "Grey@w\n\t9. @dgDark Grey@w\n\t10. @lbLight Blue@w\n\t11. @lGLime Green@w\n\t12. "
    "@lcLight Cyan@w\n\t13. @lrLight Red@w\n\t14. @lmLight Magenta@w\n\t15. "
    "@yYellow@w\n\t16. White@w\n> "
)

_CHOICE = (
    "\nWhich would you like to change?\n\t1. Foreground\n\t2. Background\n\t"
    "3. It wasn't a mistake\n> "
)

_WHITE_BACKGROUND = (
    "Do you want FAMP to go ahead and initialize the background to be white?\n[y/n] > "
)


def _label(color: int) -> str:
    try:
        return color_label(color)
    except ValueError:
        return itoa(color, 10)


def read_color(keyboard: Keyboard, screen: TextScreen) -> Color:
    """Read colour names typed on ``keyboard`` until one is valid."""
    while True:
        line = keyboard.read_line(echo=screen.put_char)
        try:
            return color_from_name(line)
        except ValueError:
            pass
        screen.clear()
        screen.print("\nOops.. I don't thinks `@y")
        screen.print(line)
        screen.print("` @wis a valid color. Try again :)\n")
        screen.print(_RETRY_REFERENCE)


def _prompt_char(keyboard: Keyboard, screen: TextScreen, message: str) -> str:
    screen.print(message)
    return keyboard.read_char()


def clear_screen(keyboard: Keyboard, screen: TextScreen, background: int, foreground: int) -> int:
    """Clear the screen in the given colours, asking the user to fix a clash.

    Returns the attribute the screen was filled with, which becomes its default.
    """
    if text_attribute(background, foreground) != 0:
        color = text_attribute(background, foreground)
        screen.fill(color)
        return color

    while True:
        screen.clear()
        screen.color = text_attribute(0x00, 0x0F)
        screen.default_color = screen.color
        screen.print(
            "You might have made a @rmistake!@w You set your foreground and your "
            "background to \nthe same color. Your foreground is "
        )
        screen.print(_label(foreground))
        screen.print(" and you background color is ")
        screen.print(_label(background))

        choice = _prompt_char(keyboard, screen, _CHOICE)
        screen.clear()
        screen.print(_REFERENCE)

        if choice == "3":
            color = text_attribute(background, foreground)
            break
        if choice == "2":
            background = read_color(keyboard, screen)
        else:
            foreground = read_color(keyboard, screen)
        color = text_attribute(background, foreground)

        if foreground != background and (foreground & 0x0F) != (background & 0x0F):
            break

        color = screen.default_color
        screen.clear()
        answer = _prompt_char(keyboard, screen, _WHITE_BACKGROUND)
        screen.put_char(answer)
        screen.put_char("\n")
        if answer == "y":
            background = Color.WHITE
            break

    screen.fill(color)
    return color