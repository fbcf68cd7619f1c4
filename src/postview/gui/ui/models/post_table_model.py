"""Table model for the visible window of an owner's posts."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Optional

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QObject, Qt

from ....domain.models import Post


class PostColumn(IntEnum):
    TITLE = 0
    BODY = 1
    ACTION = 2


_HEADERS = {
    PostColumn.TITLE: "Title",
    PostColumn.BODY: "Body",
    PostColumn.ACTION: "Action",
}

POST_ID_ROLE = Qt.ItemDataRole.UserRole + 1


class PostTableModel(QAbstractTableModel):
    """Rows are exactly the posts the view model currently shows."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._posts: List[Post] = []

    def set_posts(self, posts: List[Post]) -> None:
        self.beginResetModel()
        self._posts = list(posts)
        self.endResetModel()

    def post_at(self, row: int) -> Optional[Post]:
        if 0 <= row < len(self._posts):
            return self._posts[row]
        return None

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._posts)

    def columnCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(PostColumn)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        post = self.post_at(index.row()) if index.isValid() else None
        if post is None:
            return None
        column = PostColumn(index.column())
        if role == Qt.ItemDataRole.DisplayRole:
            if column is PostColumn.TITLE:
                return post.title
            if column is PostColumn.BODY:
                return post.body
            return "Delete"
        if role == Qt.ItemDataRole.ToolTipRole and column is PostColumn.ACTION:
            return f"Delete post {post.id}"
        if role == POST_ID_ROLE:
            return post.id
        return None

    def headerData(  # noqa: N802  # Qt override
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole:
            return _HEADERS.get(PostColumn(section)) if section < len(PostColumn) else None
        return None
