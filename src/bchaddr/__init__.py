# re-import names that should be visible to the user
from .address import DecodedAddress, render, resolve  # noqa: F401
from .api import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .formats import Format, Type  # noqa: F401
from .network import Mode, Network  # noqa: F401
