import os

from easydelay.utils.env import is_styling_supported
from easydelay.utils.types import to_int


# =====================
# === APP META DATA ===
# =====================

APP_VERSION = "0.1"


# =====================
# ==== ENVIRONMENT ====
# =====================

ENV_ANSI_COLORS_DISABLED = "ANSI_COLORS_DISABLED"
ENV_EASYDELAY_VERBOSITY = "EASYDELAY_VERBOSITY"


# =====================
# ===== VERBOSITY =====
# =====================

VERBOSITY_NONE = 0
VERBOSITY_ERROR = 1
VERBOSITY_WARNING = 2
VERBOSITY_INFO = 3
VERBOSITY_DEBUG = 4
VERBOSITY_HUGE = 5

VERBOSITY_MIN = VERBOSITY_NONE
VERBOSITY_MAX = VERBOSITY_HUGE


# =====================
# ======== SETUP ======
# =====================

easydelay_setup_done = False

def easydelay_setup(default_verbosity: int = VERBOSITY_NONE):
    """
    Configures easydelay: initializes the colors and the logging.
    """

    global easydelay_setup_done
    if easydelay_setup_done:
        return
    easydelay_setup_done = True

    from easydelay.styling import init_styling
    from easydelay.settings import set_setting, Settings

    # disable colors when redirection is involved or if colors are disabled
    env_ansi_disabled = os.getenv(ENV_ANSI_COLORS_DISABLED)
    env_starting_verbosity = os.getenv(ENV_EASYDELAY_VERBOSITY)

    init_styling()
    set_setting(Settings.COLORS, is_styling_supported() and not env_ansi_disabled)

    starting_verbosity = to_int(env_starting_verbosity,
                                raise_exceptions=False,
                                default=default_verbosity)

    set_setting(Settings.VERBOSITY, starting_verbosity)
