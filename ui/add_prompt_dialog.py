from __future__ import annotations
from typing import List, Optional

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QTextEdit,
    QSpinBox, QDialogButtonBox
)

from models.prompt import MIN_CONTENT_LENGTH as MIN_CONTENT, MIN_TITLE_LENGTH as MIN_TITLE, PromptCreate
from presentation.complexity import complexity_class, complexity_color, complexity_style_label


def form_errors(title: str, content: str) -> List[str]:
    errors = []
    if not title.strip():
        errors.append("Title is required.")
    elif len(title.strip()) < MIN_TITLE:
        errors.append(f"Title needs at least {MIN_TITLE} characters.")
    if not content.strip():
        errors.append("Description is required.")
    elif len(content.strip()) < MIN_CONTENT:
        errors.append(f"Description needs at least {MIN_CONTENT} characters.")
    return errors


class AddPromptDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Create prompt")
        self.resize(700, 480)

        root = QVBoxLayout(self)

        # Title
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("e.g. Neon city skyline at dusk")
        root.addWidget(QLabel("Title *"))
        root.addWidget(self.title_edit)

        # Complexity 1-10 + live indicator
        row = QHBoxLayout()
        self.complexity_spin = QSpinBox()
        self.complexity_spin.setRange(1, 10)
        self.complexity_spin.setValue(5)
        self.complexity_lbl = QLabel("")
        row.addWidget(QLabel("Complexity *"))
        row.addWidget(self.complexity_spin)
        row.addWidget(self.complexity_lbl, 1)
        root.addLayout(row)

        # Prompt text
        self.content_edit = QTextEdit()
        root.addWidget(QLabel("Description *"))
        root.addWidget(self.content_edit, 1)

        # Errors
        self.error_lbl = QLabel("")
        self.error_lbl.setStyleSheet("color:#ef4444;")
        root.addWidget(self.error_lbl)

        # Buttons
        self.buttons = QDialogButtonBox(QDialogButtonBox.Cancel | QDialogButtonBox.Ok)
        self.buttons.button(QDialogButtonBox.Ok).setText("Save prompt")
        root.addWidget(self.buttons)
        self.buttons.accepted.connect(self.on_accept)
        self.buttons.rejected.connect(self.reject)

        # Live-Validation
        self.title_edit.textChanged.connect(self.validate)
        self.content_edit.textChanged.connect(self.validate)
        self.complexity_spin.valueChanged.connect(self.update_complexity)

        self.update_complexity()
        self.validate()

    def complexity_css_class(self) -> str:
        return complexity_class(self.complexity_spin.value())

    def complexity_text(self) -> str:
        return complexity_style_label(self.complexity_spin.value())

    def update_complexity(self):
        text = self.complexity_text()
        self.complexity_lbl.setText(text)
        self.complexity_lbl.setStyleSheet(
            f"background:{complexity_color(text)};border-radius:8px;padding:2px 8px;"
        )

    def validate(self):
        title = self.title_edit.text()
        content = self.content_edit.toPlainText()
        errors = form_errors(title, content)

        # UI Feedback
        def mark(widget, ok: bool):
            widget.setStyleSheet("" if ok else "border:1px solid #ef4444;")
        mark(self.title_edit, len(title.strip()) >= MIN_TITLE)
        mark(self.content_edit, len(content.strip()) >= MIN_CONTENT)

        self.error_lbl.setText(" \n".join(errors))
        self.buttons.button(QDialogButtonBox.Ok).setEnabled(len(errors) == 0)

    def get_result(self) -> Optional[PromptCreate]:
        if form_errors(self.title_edit.text(), self.content_edit.toPlainText()):
            return None
        return PromptCreate(
            title=self.title_edit.text(),
            content=self.content_edit.toPlainText(),
            complexity=self.complexity_spin.value(),
        )

    def on_accept(self):
        self.validate()
        if self.buttons.button(QDialogButtonBox.Ok).isEnabled():
            self.accept()
