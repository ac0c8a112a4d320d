from __future__ import annotations
from typing import NewType

Address   = NewType("Address", str)    # as given by the caller, no normalization
RequestId = int | str
