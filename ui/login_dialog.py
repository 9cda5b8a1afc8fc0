from __future__ import annotations
import logging

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QApplication
)
from PySide6.QtCore import QTimer

from services.auth_service import AuthService, DEMO_EMAIL, DEMO_PASSWORD
from services.errors import AuthError

log = logging.getLogger(__name__)


class LoginDialog(QDialog):
    def __init__(self, auth: AuthService, delay_ms: int = 1000, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Prompt Nexus – Sign in")
        self.resize(420, 280)
        self.auth = auth
        self.delay_ms = delay_ms
        self.user = None

        root = QVBoxLayout(self)

        self.email_edit = QLineEdit()
        self.email_edit.setPlaceholderText("you@example.com")
        root.addWidget(QLabel("Email"))
        root.addWidget(self.email_edit)

        self.password_edit = QLineEdit()
        self.password_edit.setEchoMode(QLineEdit.EchoMode.Password)
        root.addWidget(QLabel("Password"))
        root.addWidget(self.password_edit)

        # Demo access
        demo = QHBoxLayout()
        demo.addWidget(QLabel(f"Demo: {DEMO_EMAIL}"), 1)
        btn_copy_email = QPushButton("Copy email")
        btn_copy_pwd = QPushButton("Copy password")
        demo.addWidget(btn_copy_email)
        demo.addWidget(btn_copy_pwd)
        root.addLayout(demo)

        self.error_lbl = QLabel("")
        self.error_lbl.setStyleSheet("color:#ef4444;")
        self.error_lbl.setWordWrap(True)
        root.addWidget(self.error_lbl)

        buttons = QHBoxLayout()
        self.btn_quick = QPushButton("Quick demo login")
        self.btn_login = QPushButton("Sign in")
        self.btn_login.setDefault(True)
        buttons.addWidget(self.btn_quick)
        buttons.addStretch(1)
        buttons.addWidget(self.btn_login)
        root.addLayout(buttons)

        btn_copy_email.clicked.connect(lambda: self.copy_to_clipboard(DEMO_EMAIL))
        btn_copy_pwd.clicked.connect(lambda: self.copy_to_clipboard(DEMO_PASSWORD))
        self.btn_quick.clicked.connect(self.quick_login)
        self.btn_login.clicked.connect(self.on_submit)

        self.auto_fill_credentials()

    def auto_fill_credentials(self):
        self.email_edit.setText(DEMO_EMAIL)
        self.password_edit.setText(DEMO_PASSWORD)

    def copy_to_clipboard(self, text: str):
        QApplication.clipboard().setText(text)
        log.info("Copied to clipboard: %s", text if text != DEMO_PASSWORD else "<password>")

    def quick_login(self):
        self.auto_fill_credentials()
        self.on_submit()

    def set_loading(self, loading: bool):
        self.btn_login.setEnabled(not loading)
        self.btn_quick.setEnabled(not loading)
        self.btn_login.setText("Signing in…" if loading else "Sign in")

    def on_submit(self):
        self.error_lbl.setText("")
        self.set_loading(True)
        if self.delay_ms:
            QTimer.singleShot(self.delay_ms, self._do_login)
        else:
            self._do_login()

    def _do_login(self):
        try:
            self.user = self.auth.login(self.email_edit.text(), self.password_edit.text())
        except AuthError as e:
            self.error_lbl.setText(e.message)
            return
        except OSError as e:
            log.error("Could not store session: %s", e)
            self.error_lbl.setText(f"Could not store session: {e}")
            return
        finally:
            self.set_loading(False)
        self.accept()
