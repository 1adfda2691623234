"""Allow `python -m sexpc`."""

from __future__ import annotations

import sys

from sexpc import main

sys.exit(main())
