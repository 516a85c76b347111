"""Build a single-file executable of the viewer with PyInstaller. Run from project root."""

import os
import subprocess
import sys

NAME = "pokedex-viewer"


def build_command(entry: str = "main.py") -> list[str]:
    # ImageTk is imported lazily, so PyInstaller does not see it
    return [
        sys.executable, "-m", "PyInstaller",
        "--onefile",
        "--windowed",
        "--name", NAME,
        "--clean",
        "--noconfirm",
        "--hidden-import", "PIL.ImageTk",
        entry,
    ]


def main():
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    os.chdir(root)

    entry = "main.py"
    if not os.path.isfile(entry):
        print(f"Entry script not found: {entry}")
        sys.exit(1)

    try:
        import PyInstaller.__main__  # noqa: F401
    except ImportError:
        print("PyInstaller required: pip install pyinstaller")
        sys.exit(1)

    cmd = build_command(entry)
    print("Running:", " ".join(cmd))
    result = subprocess.run(cmd, cwd=root)
    if result.returncode != 0:
        sys.exit(result.returncode)
    exe_name = f"{NAME}.exe" if sys.platform == "win32" else NAME
    print("Built:", os.path.join(root, "dist", exe_name))


if __name__ == "__main__":
    main()
