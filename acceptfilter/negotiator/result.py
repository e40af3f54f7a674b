import logging
from colorama import Fore, Style

log = logging.getLogger(__name__)

LEVEL_COLORS = (
    (logging.ERROR, Fore.RED),
    (logging.WARNING, Fore.YELLOW),
)


def level_color(levelno):
    for level, color in LEVEL_COLORS:
        if levelno >= level:
            return color
    return ''


class CaptureResult:
    """Collect the log output of one check and print it under a PASSED or
    FAILED verdict."""
    PASS = True
    FAIL = False

    def __init__(self, *, level=logging.INFO):
        self.success = self.PASS
        self.messages = []
        self.level = level

    def start(self, check):
        self.success = self.PASS
        self.messages[:] = []
        package_log = logging.getLogger('acceptfilter')
        package_log.handlers = [self]
        package_log.setLevel(logging.DEBUG)
        print(f'{Style.BRIGHT}{check}{Style.RESET_ALL} ... ', end='')

    def info(self, message):
        log.info(message)

    def fail(self, message):
        self.success = self.FAIL
        log.error(message)
        return not message

    def end(self):
        verdict = Fore.GREEN + 'PASSED' if self.success else Fore.RED + 'FAILED'
        print(verdict + Fore.RESET)
        for message in self.messages:
            print(message + Fore.RESET)

    def handle(self, record):
        self.messages.append(f' {level_color(record.levelno)}{record.getMessage()}')
