# SPDX-FileCopyrightText: 2026 sharecheck contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment setup
#   • src/ on sys.path so `import sharecheck` works without installing
#   • SHARECHECK_* variables cleared so the process policy uses defaults

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

for _name in [key for key in os.environ if key.startswith("SHARECHECK_")]:
    del os.environ[_name]
