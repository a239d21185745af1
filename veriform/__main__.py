# -*- coding: utf-8 -*-
"""Location: ./veriform/__main__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Allow ``python -m veriform``.
"""

# Standard
import sys

# First-Party
from veriform.cli import main

sys.exit(main())
