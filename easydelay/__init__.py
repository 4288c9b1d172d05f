from easydelay.common import APP_VERSION as __version__
from easydelay.delay import Delay
from easydelay.errors import UnknownTimeUnitError
from easydelay.utils.measures import duration_to_ms

__all__ = ["Delay", "UnknownTimeUnitError", "duration_to_ms"]
