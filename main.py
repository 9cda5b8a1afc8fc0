import logging, sys, os

os.environ.setdefault("PYTHONUTF8", "1")
try:
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")
except (AttributeError, OSError):
    pass

from PySide6.QtWidgets import QApplication
from config.config_loader import load_config
from services.api_client import PromptApiClient
from services.auth_service import AuthService
from services.session_store import SessionContext
from ui.login_dialog import LoginDialog
from ui.main_window import MainWindow

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")


def run_login(auth: AuthService, delay_ms: int) -> bool:
    if auth.is_logged_in():
        return True
    return bool(LoginDialog(auth, delay_ms=delay_ms).exec())


def main():
    try:
        settings = load_config()
        session = SessionContext(settings.session_path).load()
        api = PromptApiClient(settings.api_url, timeout=settings.http_timeout)
        auth = AuthService(session, api)

        app = QApplication(sys.argv)
        if not run_login(auth, settings.login_delay_ms):
            logging.info("Login cancelled.")
            sys.exit(0)

        win = MainWindow(app, api, auth)

        def on_logged_out():
            win.hide()
            if run_login(auth, settings.login_delay_ms):
                win.update_user()
                win.navigate("dashboard")
                win.show()
            else:
                app.quit()

        win.logged_out.connect(on_logged_out)
        win.show()
        sys.exit(app.exec())
    except Exception:
        logging.exception("❌ Error while starting the application")
        sys.exit(1)

if __name__ == "__main__":
    main()
