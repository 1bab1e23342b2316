# ANSI escape sequences for colors (保持原风格)
import threading

YELLOW = '\033[93m'
RESET = '\033[0m'


def log_info(msg: str) -> None:
    print(msg)


def log_warn(msg: str) -> None:
    print(f"{YELLOW}[Warn] {msg}{RESET}")


def format_rename(kind: str, original: str, renamed: str) -> str:
    return f"{kind} '{original}' 与已有名称或关键字冲突，已改名为 '{renamed}'"


class RenameLog:
    """一次生成过程中的改名记录，由调用方创建并持有。

    传给各 validate_* 函数后，改名只记录在这里而不立即打印；
    生成结束时调用 flush() 一次性输出并清空。
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._renames: list[tuple[str, str, str]] = []

    def record(self, kind: str, original: str, renamed: str) -> None:
        with self._lock:
            self._renames.append((kind, original, renamed))

    def renames(self) -> list[tuple[str, str, str]]:
        """返回尚未输出的 (类别, 原名, 新名) 副本。"""
        with self._lock:
            return list(self._renames)

    def __len__(self) -> int:
        with self._lock:
            return len(self._renames)

    def flush(self, header: str = None) -> int:
        """输出并清空全部改名记录，返回输出条数；没有记录时不输出任何内容。"""
        with self._lock:
            items, self._renames = self._renames, []
        if not items:
            return 0
        log_info(header or "----- Renamed -----")
        for kind, original, renamed in items:
            log_warn(format_rename(kind, original, renamed))
        return len(items)
