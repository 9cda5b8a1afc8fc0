# ui/main_window.py – navbar, library (search + table) and detail page

import logging
from html import escape
from typing import List, Optional
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QLabel, QTableView,
    QTextEdit, QToolBar, QMessageBox, QPushButton, QStackedWidget, QHeaderView, QSizePolicy
)
from PySide6.QtCore import QModelIndex, QSize, Signal
from PySide6.QtGui import QIcon

from models.prompt import PromptDetailViewModel, PromptViewModel
from presentation.mapper import map_prompt_detail, map_prompts
from presentation.search import filter_prompts
from services.api_client import PromptApiClient
from services.auth_service import AuthService
from services.errors import PromptNexusError
from ui.add_prompt_dialog import AddPromptDialog
from ui.prompt_table_model import PromptTableModel
from ui import routes
from utils.html_render import render_details

log = logging.getLogger(__name__)

ICON_DIR = Path("assets/icons")
def icon(name: str) -> QIcon:
    p = ICON_DIR / f"{name}.svg"
    return QIcon(str(p)) if p.exists() else QIcon()


class MainWindow(QMainWindow):
    logged_out = Signal()

    def __init__(self, app, api: PromptApiClient, auth: AuthService, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.app = app
        self.api = api
        self.auth = auth
        self.setWindowTitle("Prompt Nexus")
        self.resize(1200, 820)

        self.prompts: List[PromptViewModel] = []
        self.detail_prompt: Optional[PromptDetailViewModel] = None
        self.current_route = routes.Route(routes.DASHBOARD)

        # Navbar
        tb = QToolBar("Navigation", self)
        tb.setIconSize(QSize(18, 18))
        tb.setMovable(False)
        self.addToolBar(tb)

        brand = QLabel("<b>Prompt Nexus</b>")
        brand.setStyleSheet("padding:0 12px;font-size:15px;")
        self.btn_dashboard = QPushButton(icon("dashboard"), "Dashboard")
        self.btn_add = QPushButton(icon("add"), "Create Prompt")
        self.btn_logout = QPushButton(icon("logout"), "Logout")
        self.btn_dashboard.setCheckable(True)
        self.btn_add.setCheckable(True)
        tb.addWidget(brand)
        tb.addSeparator()
        for b in (self.btn_dashboard, self.btn_add):
            b.setMinimumHeight(28)
            tb.addWidget(b)
        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        tb.addWidget(spacer)
        self.user_lbl = QLabel("")
        tb.addWidget(self.user_lbl)
        tb.addWidget(self.btn_logout)

        # --- Library page ---
        library = QWidget()
        lib_layout = QVBoxLayout(library)
        lib_layout.setContentsMargins(12, 12, 12, 12)
        search_row = QHBoxLayout()
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search prompts by title or description")
        self.search_edit.setClearButtonEnabled(True)
        self.count_lbl = QLabel("")
        search_row.addWidget(QLabel("Search:"))
        search_row.addWidget(self.search_edit, 1)
        search_row.addSpacing(8)
        search_row.addWidget(self.count_lbl)
        lib_layout.addLayout(search_row)

        self.model = PromptTableModel()
        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QTableView.SelectRows)
        self.table.setSelectionMode(QTableView.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setWordWrap(True)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        self.table.setColumnWidth(1, 160)
        self.table.setColumnWidth(2, 90)
        self.table.setColumnWidth(3, 120)
        lib_layout.addWidget(self.table)

        # --- Detail page ---
        detail = QWidget()
        det_layout = QVBoxLayout(detail)
        det_layout.setContentsMargins(12, 12, 12, 12)
        det_buttons = QHBoxLayout()
        self.btn_back = QPushButton(icon("back"), "Back to library")
        self.btn_copy = QPushButton(icon("copy"), "Copy prompt")
        det_buttons.addWidget(self.btn_back)
        det_buttons.addStretch(1)
        det_buttons.addWidget(self.btn_copy)
        det_layout.addLayout(det_buttons)
        self.detail = QTextEdit()
        self.detail.setReadOnly(True)
        det_layout.addWidget(self.detail, 1)

        self.stack = QStackedWidget(self)
        self.library_page = library
        self.detail_page = detail
        self.stack.addWidget(library)
        self.stack.addWidget(detail)
        self.setCentralWidget(self.stack)

        # Signals
        self.btn_dashboard.clicked.connect(lambda: self.navigate(routes.DASHBOARD))
        self.btn_add.clicked.connect(lambda: self.navigate(routes.ADD))
        self.btn_logout.clicked.connect(self.on_logout)
        self.btn_back.clicked.connect(lambda: self.navigate(routes.DASHBOARD))
        self.btn_copy.clicked.connect(self.on_copy_prompt)
        self.search_edit.textChanged.connect(self.on_search_changed)
        self.table.doubleClicked.connect(self.on_row_activated)

        self.update_user()
        self.navigate(routes.DASHBOARD)

    # --- navigation ---
    def navigate(self, path: str):
        route = routes.resolve_route(path)
        log.debug("navigate(%r) -> %s", path, route)
        if route.name == routes.LOGIN:
            if self.auth.is_logged_in():
                route = routes.Route(routes.DASHBOARD)
            else:
                self.logged_out.emit()
                return
        if route.name == routes.ADD:
            self._set_active(routes.ADD)
            self.on_add_prompt()
            return
        self.current_route = route
        if route.name == routes.DETAIL:
            self._set_active(routes.DETAIL)
            self.stack.setCurrentWidget(self.detail_page)
            self.load_detail(route.prompt_id)
        else:
            self._set_active(routes.DASHBOARD)
            self.stack.setCurrentWidget(self.library_page)
            self.load_prompts()

    def _set_active(self, name: str):
        self.btn_dashboard.setChecked(name == routes.DASHBOARD)
        self.btn_add.setChecked(name == routes.ADD)

    def update_user(self):
        user = self.auth.session.user
        self.user_lbl.setText(f"{user.name}  " if user and user.name else "")

    # --- data ---
    def load_prompts(self):
        try:
            records = self.api.list_prompts()
        except PromptNexusError as e:
            log.error("Error fetching prompts: %s", e)
            self.statusBar().showMessage(f"Could not load prompts: {e.message}")
            return
        self.prompts = map_prompts(records)
        self.apply_filter()
        self.statusBar().showMessage(f"{len(self.prompts)} prompts loaded.")

    def apply_filter(self):
        rows = filter_prompts(self.prompts, self.search_edit.text())
        self.model.set_rows(rows)
        self.count_lbl.setText(f"{len(rows)} / {len(self.prompts)}")

    def load_detail(self, prompt_id):
        self.detail_prompt = None
        self.detail.setHtml('<div style="color:#6B7280">Loading…</div>')
        try:
            record = self.api.get_prompt(prompt_id)
        except PromptNexusError as e:
            log.error("Error fetching prompt %s: %s", prompt_id, e)
            self.detail.setHtml(f'<div style="color:#ef4444">{escape(e.message)}</div>')
            return
        self.detail_prompt = map_prompt_detail(record)
        self.detail.setHtml(render_details(self.detail_prompt))
        self.setWindowTitle(f"Prompt Nexus – {self.detail_prompt.title}")

    # --- signals ---
    def on_search_changed(self, text):
        self.apply_filter()

    def on_row_activated(self, index: QModelIndex):
        row = self.model.row_at(index.row())
        if not row or row.id in (None, ""):
            log.error("No prompt ID found!")
            return
        self.navigate(routes.prompt_path(row.id))

    def on_copy_prompt(self):
        if self.detail_prompt and self.detail_prompt.content:
            self.app.clipboard().setText(self.detail_prompt.content)
            self.statusBar().showMessage("Prompt copied to clipboard.", 3000)

    def on_add_prompt(self):
        dlg = AddPromptDialog(self)
        if dlg.exec():
            payload = dlg.get_result()
            if payload is not None:
                try:
                    created = self.api.create_prompt(payload)
                except PromptNexusError as e:
                    log.error("Error saving prompt: %s", e)
                    QMessageBox.critical(self, "Create prompt", f"Error saving prompt:\n{e.message}")
                    self._set_active(self.current_route.name)
                    return
                self.statusBar().showMessage(f"Prompt '{created.title}' saved.", 3000)
        self.navigate(routes.DASHBOARD)

    def on_logout(self):
        self.auth.logout()
        self.prompts = []
        self.model.set_rows([])
        self.logged_out.emit()
