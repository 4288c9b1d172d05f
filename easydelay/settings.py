from typing import Dict, Callable, List, Tuple, Union, Optional

from easydelay.common import VERBOSITY_MIN, VERBOSITY_MAX, VERBOSITY_NONE
from easydelay.utils.mathematics import rangify
from easydelay.utils.obj import values
from easydelay.utils.types import to_int, to_bool


SettingValue = Union[str, int, float, bool]
SettingCallback = Callable[[str, SettingValue], None]

class Settings:
    VERBOSITY = "verbose"
    COLORS = "colors"


SETTINGS = values(Settings)

_settings_values: Dict[str, SettingValue] = {
    Settings.VERBOSITY: VERBOSITY_NONE,
    Settings.COLORS: True,
}

_settings_callbacks: List[Tuple[Callable, List[str], bool]] = [] # list of (callback, keys_filter, lazy)

_SETTINGS_PARSERS: Dict[str, Callable[[SettingValue], SettingValue]] = {
    Settings.VERBOSITY: lambda o: rangify(to_int(o, raise_exceptions=True), VERBOSITY_MIN, VERBOSITY_MAX),
    Settings.COLORS: lambda v: to_bool(v, raise_exceptions=True),
}


def set_setting(key: str, value: SettingValue):
    parser = _SETTINGS_PARSERS.get(key)

    if not parser:
        raise ValueError(f"Unknown key: \"{key}\"")

    try:
        parsed = parser(value)
    except ValueError:
        raise ValueError(f"Invalid value: \"{value}\"")

    prev_val = _settings_values[key]
    _settings_values[key] = parsed
    _notify_setting_changed(key, parsed, prev_val)  # eventually notify the callbacks

def get_setting(key: str, default=None) -> Optional[SettingValue]:
    return _settings_values.get(key, default)

def add_setting_callback(key_filter: str, callback: SettingCallback, lazy: bool=True):
    _settings_callbacks.append((callback, [key_filter], lazy))

def remove_settings_callback(callback: SettingCallback):
    _settings_callbacks[:] = [c for c in _settings_callbacks if c[0] is not callback]

def _notify_setting_changed(key: str, value: SettingValue, prev_value: SettingValue):
    for cb, keys_filter, lazy in _settings_callbacks:
        if (not keys_filter or key in keys_filter) and \
            (not lazy or prev_value != value):
            cb(key, value)
