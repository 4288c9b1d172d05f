# ANSI escapes codes (colors, styles)

RESET =             "\033[0m"


FG_BLACK =          "\033[30m"
FG_RED =            "\033[31m"
FG_GREEN =          "\033[32m"
FG_YELLOW =         "\033[33m"
FG_BLUE =           "\033[34m"
FG_MAGENTA =        "\033[35m"
