from typing import Any, Optional, Union


# CHECKERS


def is_float(o: object) -> bool:
    return isinstance(o, float)


def is_int(o: object) -> bool:
    # bool is a subclass of int, but it's not a number for us
    return isinstance(o, int) and not isinstance(o, bool)


def is_str(o: object) -> bool:
    return isinstance(o, str)


def is_bool(o: object) -> bool:
    return isinstance(o, bool)


# CONVERTERS


def to_float(o: Any, default=None, raise_exceptions=False) -> Optional[float]:
    val = None
    try:
        val = float(o)
    except (TypeError, ValueError):
        pass

    if is_float(val):
        return val

    if raise_exceptions:
        raise ValueError("Conversion to float failed: {}".format(o))

    return default


def to_int(o: Any, default=None, raise_exceptions=False) -> Optional[int]:
    val = None
    try:
        val = int(o)
    except (TypeError, ValueError):
        pass

    if is_int(val):
        return val

    if raise_exceptions:
        raise ValueError("Conversion to int failed: {}".format(o))

    return default


def to_bool(o: Any, default=None, raise_exceptions=False) -> Optional[bool]:
    val = None
    if is_bool(o):
        val = o
    elif is_int(o):
        val = o != 0
    elif is_str(o):
        val = str_to_bool(o)

    if is_bool(val):
        return val

    if raise_exceptions:
        raise ValueError("Conversion to boolean failed: {}".format(o))

    return default


def str_to_bool(s: str, ystrings=None, nstrings=None, default=None) -> Union[bool, None]:
    if not ystrings:
        ystrings = ["true", "1", "yes", "y"]
    if not nstrings:
        nstrings = ["false", "0", "no", "n"]

    if s.lower() in ystrings:
        return True
    if s.lower() in nstrings:
        return False
    return default
