from .owner_table_model import OwnerTableModel
from .post_table_model import PostTableModel

__all__ = ["OwnerTableModel", "PostTableModel"]
