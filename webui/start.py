"""
ShotDirector API launcher.

Usage:
  python webui/start.py             # Serve the API on :8000
  python webui/start.py --dev       # Same, with auto-reload
  python webui/start.py --no-browser
"""
from __future__ import annotations

import subprocess
import sys
import time
import webbrowser
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
BACKEND_PORT = 8000
# Litestar's generated OpenAPI browser
DOCS_PATH = "/schema/swagger"


def backend_command(dev: bool) -> list[str]:
    cmd = [
        sys.executable, "-m", "uvicorn",
        "webui.backend.app:app",
        "--port", str(BACKEND_PORT),
        "--host", "0.0.0.0",
    ]
    if dev:
        cmd.append("--reload")
    return cmd


def main() -> None:
    dev = "--dev" in sys.argv

    print(f"► Starting ShotDirector API on http://localhost:{BACKEND_PORT} …")
    backend = subprocess.Popen(backend_command(dev), cwd=str(REPO_ROOT))

    if "--no-browser" not in sys.argv:
        time.sleep(1.5)
        webbrowser.open(f"http://localhost:{BACKEND_PORT}{DOCS_PATH}")

    try:
        backend.wait()
    except KeyboardInterrupt:
        print("\n⛔ Shutting down…")
    finally:
        backend.terminate()


if __name__ == "__main__":
    main()
