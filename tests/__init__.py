from easydelay.common import easydelay_setup, VERBOSITY_ERROR
from easydelay.settings import set_setting, Settings

easydelay_setup()
set_setting(Settings.VERBOSITY, VERBOSITY_ERROR)
# set_setting(Settings.VERBOSITY, VERBOSITY_MAX)
