"""
工作线程池

固定数量的工作线程共享一个容量为 1 的队列：生产者（遍历器）每放入一个路径
就会阻塞，直到有工作线程取走它。所有路径放入后，为每个线程放入一个结束标记，
然后等待全部线程退出。
"""

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Collection, Iterable, Optional

from checkenv.core.scanner.extractor import extract_env_vars, read_file_bytes
from checkenv.core.scanner.filters import has_extension
from checkenv.core.scanner.models import ScanResult
from checkenv.core.scanner.patterns import DEFAULT_WORKERS

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str], None]

# 队列结束标记
_DONE = object()


class WorkerPool:
    """扫描工作线程池"""

    def __init__(
        self,
        extensions: Collection[str],
        workers: int = DEFAULT_WORKERS,
        on_file: Optional[ProgressCallback] = None,
    ):
        self.extensions = extensions
        self.workers = workers
        self.on_file = on_file
        self.result = ScanResult()
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self._stats_lock = threading.Lock()
        self._errors: list[BaseException] = []

    def run(self, paths: Iterable[str]) -> ScanResult:
        """
        消费路径直到耗尽，返回扫描结果

        路径迭代器在调用线程中执行；迭代器抛出的异常（如遍历错误）会在
        所有工作线程退出后原样抛出。
        """
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="checkenv") as executor:
            for _ in range(self.workers):
                executor.submit(self._work)
            try:
                for path in paths:
                    self._queue.put(path)
            finally:
                for _ in range(self.workers):
                    self._queue.put(_DONE)

        if self._errors:
            raise self._errors[0]
        return self.result

    def _work(self) -> None:
        while True:
            path = self._queue.get()
            if path is _DONE:
                return
            try:
                self._scan_file(path)
            except Exception as e:
                # Keep draining so the producer never blocks on a dead pool.
                logger.error(f"Worker failed on {path}: {e}")
                with self._stats_lock:
                    self._errors.append(e)

    def _scan_file(self, path: str) -> None:
        # The walker filters on ignore prefixes; only the extension is re-checked here.
        if not has_extension(path, self.extensions):
            return

        content = read_file_bytes(path)
        if content is None:
            with self._stats_lock:
                self.result.files_skipped += 1
            return

        self.result.discovered.merge(extract_env_vars(content))
        with self._stats_lock:
            self.result.files_scanned += 1

        if self.on_file:
            self.on_file(path)
