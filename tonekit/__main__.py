# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

import sys

from tonekit.cli import main

sys.exit(main())
