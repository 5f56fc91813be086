# theme.py
# Locates and applies the application stylesheet

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
ASSETS_DIR = BASE_DIR / "assets"
STYLESHEET_PATH = ASSETS_DIR / "styles.qss"


class ResourceLoadError(Exception):
    """Raised when a startup resource is missing or cannot be read."""

    def __init__(self, path, reason):
        super().__init__(f"Could not load {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def load_stylesheet(path=None):
    """
    Reads the stylesheet text.
    Raises ResourceLoadError if the file is absent, unreadable or not UTF-8.
    """
    path = Path(path) if path is not None else STYLESHEET_PATH

    if not path.is_file():
        raise ResourceLoadError(path, "file not found")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ResourceLoadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ResourceLoadError(path, e.strerror or str(e)) from e


def apply_stylesheet(app, path=None):
    # Applied once for the whole application
    app.setStyleSheet(load_stylesheet(path))
