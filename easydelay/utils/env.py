import io
import os
import sys
from stat import S_ISCHR


def is_terminal(fileno: int) -> bool:
    """ Returns true if the given file number belongs to a terminal (stdout)"""
    return S_ISCHR(os.fstat(fileno).st_mode)


def is_stdout_terminal() -> bool:
    """ Returns true if stdout belongs to a terminal """
    try:
        return is_terminal(sys.stdout.fileno())
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        # stdout replaced by something that is not a real file (e.g. captured)
        return False


def is_styling_supported() -> bool:
    """
    Returns true if colors are supported (actually only if
    stdout is bound to a terminal)
    """
    return is_stdout_terminal()


if __name__ == "__main__":
    print(f"Is a terminal: {is_stdout_terminal()}")
    print(f"Supports colors: {is_styling_supported()}")
