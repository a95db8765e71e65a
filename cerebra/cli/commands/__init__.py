"""
CLI Commands.

Organized by domain/feature area.
"""

from cerebra.cli.commands.db import app as db_app
from cerebra.cli.commands.folders import app as folders_app
from cerebra.cli.commands.notes import app as notes_app
from cerebra.cli.commands.settings import app as settings_app
from cerebra.cli.commands.sticky import app as sticky_app
from cerebra.cli.commands.system import app as system_app

__all__ = [
    "db_app",
    "folders_app",
    "notes_app",
    "settings_app",
    "sticky_app",
    "system_app",
]
