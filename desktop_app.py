import threading
import webview

from app import app, run_flask


def dashboard_url():
    return f"http://{app.config['APP_HOST']}:{app.config['APP_PORT']}/dashboard"


def main():
    # Flask runs in a daemon thread so closing the window ends the process
    server_thread = threading.Thread(target=run_flask, daemon=True)
    server_thread.start()

    webview.create_window("Studio Admin | Back Office", dashboard_url())
    webview.start()


if __name__ == "__main__":
    main()
