"""Single-slot generation runner with observable state for a UI shell."""

import pathlib
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from mdgen.errors import MdgenError, SessionBusyError
from mdgen.file_operations import collect_files
from mdgen.models import Category
from mdgen.output_generators import render_markdown

READY_STATUS = "Ready"
RUNNING_STATUS = "Reading files and generating Markdown..."
ERROR_STATUS = "Error"
COPIED_STATUS = "Copied to clipboard!"


class GenerationSession:
    """State a shell observes while it drives generation runs.

    Only one run may be in flight; ``start`` raises SessionBusyError
    instead of queueing a second one. Listeners registered with
    ``subscribe`` are called with the name of each field that changed.
    Runs cannot be cancelled.
    """

    def __init__(self, category: Category = Category.CSHARP):
        self._root_path = ""
        self._category = category
        self._markdown = ""
        self._status_message = READY_STATUS
        self._is_running = False
        self._listeners: list[Callable[[str], None]] = []
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mdgen")

    def subscribe(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def _set(self, field: str, value) -> None:
        setattr(self, f"_{field}", value)
        for callback in list(self._listeners):
            callback(field)

    @property
    def root_path(self) -> str:
        return self._root_path

    @root_path.setter
    def root_path(self, value: str | pathlib.Path) -> None:
        self._set("root_path", str(value))
        self._set("status_message", f"Folder selected: {value}")

    @property
    def category(self) -> Category:
        return self._category

    @category.setter
    def category(self, value: Category) -> None:
        self._set("category", value)

    @property
    def markdown(self) -> str:
        return self._markdown

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def can_generate(self) -> bool:
        return bool(self._root_path) and not self._is_running

    @property
    def can_copy(self) -> bool:
        return bool(self._markdown)

    def start(self) -> Future:
        """Start a run in the background and return its future.

        The future resolves to the new Markdown on success. On any error
        the error message replaces the Markdown and the future resolves to
        that message.

        Raises:
            SessionBusyError: If a run is already in flight
            ValueError: If no root path has been selected
        """
        if self._is_running:
            raise SessionBusyError("A generation run is already in progress")
        if not self._root_path:
            raise ValueError("No folder selected")

        self._set("is_running", True)
        self._set("status_message", RUNNING_STATUS)
        return self._executor.submit(self._run, self._root_path, self._category)

    def _run(self, root_path: str, category: Category) -> str:
        try:
            listing = collect_files(root_path, category)
            self._set("markdown", render_markdown(listing))
            self._set("status_message", f"Converted {listing.file_count} files!")
        except MdgenError as e:
            self._set("markdown", str(e))
            self._set("status_message", f"{ERROR_STATUS} ({e.kind})")
        except Exception as e:
            self._set("markdown", str(e))
            self._set("status_message", ERROR_STATUS)
        finally:
            self._set("is_running", False)
        return self._markdown

    def copy(self, sink: Callable[[str], None]) -> bool:
        """Push the current Markdown verbatim to a clipboard sink.

        Returns:
            True if something was copied
        """
        if not self.can_copy:
            return False
        sink(self._markdown)
        self._set("status_message", COPIED_STATUS)
        return True

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "GenerationSession":
        return self

    def __exit__(self, *args) -> None:
        self.close()
