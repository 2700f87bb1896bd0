"""Persistence of game progress as JSON"""
import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Optional

from git_quest.constants import STORAGE_KEY
from git_quest.exceptions import ProgressStoreError

# Import fcntl for POSIX file locking (Unix/Linux/macOS)
try:
    import fcntl
    HAS_FCNTL = True
except ImportError:
    HAS_FCNTL = False

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("current_level", "unlocked_levels", "completed_levels", "total_score")


class ProgressStore:
    """Reads and writes the saved game under a fixed storage key."""

    def __init__(self, state_dir: Path):
        """Initialize the store.

        Args:
            state_dir: Directory holding the progress file
        """
        self.state_dir = Path(state_dir)
        self.path = self.state_dir / f"{STORAGE_KEY}.json"

    @contextmanager
    def _acquire_lock(self, file_handle, operation: str = "read"):
        """Acquire a file lock around a read or write."""
        if not HAS_FCNTL:
            logger.debug("File locking not available on this platform")
            yield
            return

        try:
            lock_type = fcntl.LOCK_EX if operation == "write" else fcntl.LOCK_SH
            fcntl.flock(file_handle.fileno(), lock_type)
            yield
        finally:
            try:
                fcntl.flock(file_handle.fileno(), fcntl.LOCK_UN)
            except OSError as e:
                logger.debug(f"Error releasing lock: {e}")

    def _is_valid(self, data: Any) -> bool:
        if not isinstance(data, dict):
            logger.warning("Saved progress is not a dictionary")
            return False
        for key in REQUIRED_KEYS:
            if key not in data:
                logger.warning(f"Saved progress missing required field '{key}'")
                return False
        return True

    def load(self) -> Optional[Dict[str, Any]]:
        """Load saved progress.

        Returns:
            The saved dictionary, or None when nothing usable is on disk
        """
        if not self.path.exists():
            logger.debug("No saved progress found")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                with self._acquire_lock(f, operation="read"):
                    data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in progress file: {e}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read progress file: {e}")
            return None

        if not self._is_valid(data):
            logger.warning("Saved progress failed validation, starting fresh")
            return None
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """Write progress atomically: temp file first, then rename.

        Raises:
            ProgressStoreError: If the file cannot be written
        """
        temp_file = self.path.with_suffix(".tmp")
        try:
            self.state_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                with self._acquire_lock(f, operation="write"):
                    json.dump(data, f, indent=2)
                    f.flush()
            temp_file.replace(self.path)
            logger.debug(f"Saved progress to {self.path}")
        except (OSError, TypeError) as e:
            raise ProgressStoreError("save", str(e))
        finally:
            if temp_file.exists():
                try:
                    temp_file.unlink()
                except OSError:
                    pass

    def clear(self) -> None:
        """Delete saved progress if present."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise ProgressStoreError("clear", str(e))
