"""Value objects and wire format for assistant API response payloads."""

import logging

# Library default: emit nothing unless the host application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
