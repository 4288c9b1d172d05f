class ErrorsStrings:
    """ Error messages raised or logged by easydelay """
    UNKNOWN_TIME_UNIT = "Unknown time unit: {}"
    INVALID_DURATION = "Invalid duration: {}"
    NO_RUNNING_LOOP = "No running event loop: delays must be driven from asyncio"
    ACTION_FAILED = "Delay action raised an exception"


class UnknownTimeUnitError(ValueError):
    """ Raised when a duration string ends with an unit which is not s, m, h or d """

    def __init__(self, unit: str):
        super().__init__(ErrorsStrings.UNKNOWN_TIME_UNIT.format(unit))
        self.unit = unit
