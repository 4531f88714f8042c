"""User interaction: folder selection and notifications."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO


FOLDER_DIALOG_TITLE = "Select a Folder"


class InteractionProvider(Protocol):
    """Ask the user for a folder and report outcomes back to them."""

    def select_directory(self, title: str = FOLDER_DIALOG_TITLE) -> Optional[Path]:
        ...

    def notify_info(self, title: str, message: str) -> None:
        ...

    def notify_error(self, title: str, message: str) -> None:
        ...

    def notify_warning(self, title: str, message: str) -> None:
        ...

    def close(self) -> None:
        ...


def display_available() -> bool:
    """Return ``True`` if Tk can successfully open a display."""

    try:
        import tkinter as tk
    except ModuleNotFoundError:
        return False

    if sys.platform.startswith("win"):
        return True

    try:
        root = tk.Tk()
    except tk.TclError:
        return False
    else:
        try:
            root.withdraw()
        finally:
            root.destroy()
            # ``tk`` caches the default root; drop it so the dialogs created
            # later get a fresh one.
            tk._default_root = None  # type: ignore[attr-defined]
        return True


class TkInteraction:
    """Modal Tk dialogs parented to a hidden root window.

    The root is created lazily so constructing the provider never touches the
    display.
    """

    def __init__(self) -> None:
        self._root = None

    def _ensure_root(self):
        if self._root is None:
            import tkinter as tk

            self._root = tk.Tk()
            self._root.withdraw()
        return self._root

    def select_directory(self, title: str = FOLDER_DIALOG_TITLE) -> Optional[Path]:
        from tkinter import filedialog

        folder = filedialog.askdirectory(parent=self._ensure_root(), title=title, mustexist=True)
        # Cancelling returns "" (or an empty tuple on some Tk builds).
        if not folder:
            return None
        return Path(folder)

    def _show(self, kind: str, title: str, message: str) -> None:
        import tkinter as tk
        from tkinter import messagebox

        try:
            getattr(messagebox, kind)(title, message, parent=self._ensure_root())
        except tk.TclError:
            print(f"{title}: {message}", file=sys.stderr)

    def notify_info(self, title: str, message: str) -> None:
        self._show("showinfo", title, message)

    def notify_error(self, title: str, message: str) -> None:
        self._show("showerror", title, message)

    def notify_warning(self, title: str, message: str) -> None:
        self._show("showwarning", title, message)

    def close(self) -> None:
        if self._root is None:
            return
        import tkinter as tk

        try:
            self._root.destroy()
        except tk.TclError:
            pass
        self._root = None


class ConsoleInteraction:
    """Headless variant used with ``--input``.

    ``select_directory`` returns the folder given on the command line. Info
    messages go to ``stdout``; warnings and errors go to ``stderr``.
    """

    def __init__(
        self,
        directory: Optional[Path],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.directory = directory
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def select_directory(self, title: str = FOLDER_DIALOG_TITLE) -> Optional[Path]:
        return self.directory

    def notify_info(self, title: str, message: str) -> None:
        print(message, file=self.stdout)

    def notify_error(self, title: str, message: str) -> None:
        print(f"ERROR: {message}", file=self.stderr)

    def notify_warning(self, title: str, message: str) -> None:
        print(f"Warning: {message}", file=self.stderr)

    def close(self) -> None:
        pass
