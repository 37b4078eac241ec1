import sys

import structlog

# doctests compare what is printed to stdout, keep debug logs out of it
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
