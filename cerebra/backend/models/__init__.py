# Importing every model registers its table on Base.metadata
from cerebra.backend.models.base import Base
from cerebra.backend.models.folder import Folder
from cerebra.backend.models.note import Note
from cerebra.backend.models.setting import Setting
from cerebra.backend.models.sticky_note import StickyNote

__all__ = [
    "Base",
    "Folder",
    "Note",
    "Setting",
    "StickyNote",
]
