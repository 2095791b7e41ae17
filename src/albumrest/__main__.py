from __future__ import annotations

from albumrest.ui.cli import run

run()
