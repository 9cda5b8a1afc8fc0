from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QColor

from presentation.complexity import complexity_color

COLUMNS = ["title", "complexity_label", "formatted_views", "date"]
HEADERS = {"title": "Title", "complexity_label": "Complexity", "formatted_views": "Views", "date": "Created"}

class PromptTableModel(QAbstractTableModel):
    def __init__(self, rows=None, parent=None):
        super().__init__(parent)
        self._rows = list(rows or [])

    def set_rows(self, rows):
        self.beginResetModel()
        self._rows = list(rows)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(COLUMNS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        row = self._rows[index.row()]
        key = COLUMNS[index.column()]

        if role == Qt.DisplayRole:
            if key == "complexity_label" and row.complexity_level is not None:
                return f"{row.complexity_label} ({row.complexity_level})"
            val = getattr(row, key, "")
            return str(val) if val is not None else ""

        if role == Qt.ToolTipRole:
            return row.description

        if role == Qt.BackgroundRole and key == "complexity_label":
            return QColor(complexity_color(row.complexity_label))

        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return HEADERS.get(COLUMNS[section], COLUMNS[section])
        return str(section + 1)

    def row_at(self, row_idx: int):
        return self._rows[row_idx] if 0 <= row_idx < len(self._rows) else None
