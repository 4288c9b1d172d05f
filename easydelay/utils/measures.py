from typing import Union

from easydelay.consts.units import SECOND, MINUTE, HOUR, DAY
from easydelay.errors import UnknownTimeUnitError, ErrorsStrings
from easydelay.utils.types import is_str, to_float

# Suffix => milliseconds
TIME_UNITS = {
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
}

Duration = Union[int, float, str]


def duration_to_ms(duration: Duration) -> float:
    """
    Converts a duration to milliseconds.
    A number is taken as milliseconds as it is; a string must be
    in the form <number><unit> (e.g. "2s", "1.5m", "1h", "3d").
    Raises UnknownTimeUnitError if the unit is not recognized
    and ValueError if the number can't be parsed.
    """
    if not is_str(duration):
        return to_float(duration, raise_exceptions=True)

    unit = duration[-1:]
    factor = TIME_UNITS.get(unit)

    if factor is None:
        raise UnknownTimeUnitError(unit)

    value = to_float(duration[:-1].strip())
    if value is None:
        raise ValueError(ErrorsStrings.INVALID_DURATION.format(duration))

    return value * factor


def duration_str_human(seconds: int) -> str:
    return duration_str(seconds, fixed=False, formats=("{}h ", "{}m ", "{}s"))

def duration_str(seconds: int, *,
                 fixed: bool = True,
                 formats=("{:02}:", "{:02}:", "{:02}")):
    hours, remainder = divmod(seconds, 3600)
    mins, secs = divmod(remainder, 60)

    if fixed or hours > 0:
        return "".join(formats).format(hours, mins, secs)
    elif mins > 0:
        return "".join(formats[1:]).format(mins, secs)
    else:
        return "".join(formats[2:]).format(secs)


if __name__ == "__main__":
    print(duration_to_ms("2s"))
    print(duration_to_ms("1.5m"))
    print(duration_str(1313))
    print(duration_str_human(1313))
