"""
Asynchronous file input.

Reads an uploaded file off the caller's thread and delivers its content to a
continuation once the read completes. Reads are never cancelled.
"""
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Union

from prompt_wizard.domain import ImportTarget
from prompt_wizard.services.telemetry import StructuredLogger, get_logger


FileLoaded = Callable[[str, ImportTarget, str], None]


class AsyncFileReader:
    """Reads text files on a worker thread."""

    def __init__(
        self,
        max_workers: int = 1,
        encoding: str = 'utf-8',
        logger: Optional[StructuredLogger] = None
    ):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="file-reader")
        self._encoding = encoding
        self._logger = logger or get_logger()

    def read(
        self,
        path: Union[str, Path],
        target: Union[ImportTarget, str],
        on_loaded: Optional[FileLoaded] = None
    ) -> 'Future[str]':
        """Start reading ``path``.

        Args:
            path: File to read
            target: Where the content is meant to go
            on_loaded: Called with (raw_text, target, file_name) after a
                successful read, on the worker thread

        Returns:
            Future resolving to the file content; read and decode errors
            surface there
        """
        path = Path(path)
        target = ImportTarget.from_value(target)

        def _read() -> str:
            raw_text = path.read_text(encoding=self._encoding)
            self._logger.debug("file_read", file_name=path.name, target=target.value, chars=len(raw_text))
            if on_loaded is not None:
                on_loaded(raw_text, target, path.name)
            return raw_text

        return self._executor.submit(_read)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> 'AsyncFileReader':
        return self

    def __exit__(self, *exc) -> None:
        self.close()
