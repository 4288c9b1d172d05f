import colorama

from typing import List, Union, Optional
from easydelay.consts import ansi
from easydelay.settings import add_setting_callback, Settings, SettingValue, get_setting

_styling_cached = None

def init_styling():
    global _styling_cached

    def on_colors_changed(key: str, val: SettingValue):
        global _styling_cached
        _styling_cached = val
        if _styling_cached:
            colorama.init()

    _styling_cached = get_setting(Settings.COLORS)
    add_setting_callback(Settings.COLORS, on_colors_changed)

def styled(s: str,
           fg: Optional[str] = None,
           bg: Optional[str] = None,
           attrs: Union[str, List[str]] = ()) -> str:
    """ Styles the string with the given ansi escapes (foreground, background and attributes)"""
    if not _styling_cached:
        return s
    if isinstance(attrs, str):
        attrs = [attrs]
    return _styled(s, fg, bg, *attrs)


def _styled(s: str, *attributes) -> str:
    ss = ""

    reset = ""
    for attr in attributes:
        if attr:
            ss += attr
            reset = ansi.RESET

    ss += s + reset

    return ss


def fg(s: str, color: str) -> str:
    return styled(s, fg=color)


def black(s: str) -> str:
    return fg(s, ansi.FG_BLACK)


def red(s: str) -> str:
    return fg(s, ansi.FG_RED)


def green(s: str) -> str:
    return fg(s, ansi.FG_GREEN)


def yellow(s: str) -> str:
    return fg(s, ansi.FG_YELLOW)


def blue(s: str) -> str:
    return fg(s, ansi.FG_BLUE)


def magenta(s: str) -> str:
    return fg(s, ansi.FG_MAGENTA)

