"""
Shared pytest configuration.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QStandardPaths  # noqa: E402

# Keep settings and log files out of the user's real locations
QStandardPaths.setTestModeEnabled(True)
