"""
Export Service - Save drawings as PNG files

Rasterizes a snapshot of the committed strokes at the fixed export
resolution and writes it into the shared storage folder. Writes are
gated by a StoragePermission: a failed write without permission triggers
a permission request, and a granted request retries the write once.
"""

import time
import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from PyQt6.QtCore import QObject, QBuffer, QByteArray, QIODevice, pyqtSignal
from PyQt6.QtGui import QImage

from ..config import Config
from ..core.rasterizer import rasterize
from ..models.stroke import Stroke
from ..utils.image_utils import is_blank
from .permissions import StoragePermission


logger = logging.getLogger(__name__)


def generate_export_filename(now_ms: Optional[int] = None) -> str:
    """
    Generate the export filename.

    Format: drawing_<epoch-millis>.png

    Args:
        now_ms: Milliseconds since the epoch (defaults to now)

    Returns:
        Filename (not full path)
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{Config.EXPORT_FILENAME_PREFIX}{now_ms}.png"


def encode_png(image: QImage) -> bytes:
    """
    Encode image as PNG bytes at full quality.

    Raises:
        ValueError: If Qt could not encode the image
    """
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        ok = image.save(buffer, Config.EXPORT_FORMAT, Config.EXPORT_QUALITY)
    finally:
        buffer.close()

    if not ok:
        raise ValueError("PNG encoding failed")
    return bytes(data)


def export_png(image: QImage, destination: Union[str, Path]) -> Tuple[bool, str]:
    """
    Write image to destination as a PNG file.

    Failures are logged and reported through the return value; they are
    never raised.

    Args:
        image: Image to save
        destination: Target file path

    Returns:
        Tuple of (success: bool, message: str)
    """
    destination = Path(destination)
    try:
        payload = encode_png(image)
        with open(destination, 'wb') as f:
            f.write(payload)
    except (OSError, ValueError) as e:
        logger.error("Could not save drawing to %s: %s", destination, e)
        return False, f"Could not save drawing: {e}"

    logger.info("Saved drawing to %s (%d bytes)", destination, len(payload))
    return True, str(destination)


class ExportService(QObject):
    """
    Permission-gated PNG export of a stroke sequence.

    Signals:
        export_finished(str): path of the written file
        export_failed(str): human-readable failure message
        permission_requested(): a write failed and permission was requested
    """

    export_finished = pyqtSignal(str)
    export_failed = pyqtSignal(str)
    permission_requested = pyqtSignal()

    def __init__(
        self,
        permission: StoragePermission,
        export_folder: Optional[Path] = None,
        clock: Callable[[], float] = time.time,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._permission = permission
        self._export_folder = Path(export_folder) if export_folder else Config.get_export_folder()
        self._clock = clock
        self._last_ms = 0
        self._pending: List[Tuple[QImage, Path]] = []

        self._permission.permission_result.connect(self._on_permission_result)

    @property
    def export_folder(self) -> Path:
        return self._export_folder

    @property
    def has_pending_export(self) -> bool:
        return bool(self._pending)

    def next_export_path(self) -> Path:
        """Unique drawing_<millis>.png path inside the export folder."""
        now_ms = int(self._clock() * 1000)
        # Keep names unique even for two exports in the same millisecond
        if now_ms <= self._last_ms:
            now_ms = self._last_ms + 1
        self._last_ms = now_ms
        return self._export_folder / generate_export_filename(now_ms)

    def export_drawing(self, strokes: Iterable[Stroke]) -> Optional[Path]:
        """
        Rasterize and save the given strokes.

        Args:
            strokes: Committed strokes in commit order (snapshotted here)

        Returns:
            Path of the written file, or None if the write failed or is
            waiting on a permission request
        """
        snapshot = tuple(strokes)
        image = rasterize(snapshot, Config.EXPORT_WIDTH, Config.EXPORT_HEIGHT)
        if is_blank(image):
            logger.info("Exporting an empty drawing")

        path = self.next_export_path()
        logger.info("Exporting %d strokes to %s", len(snapshot), path)
        return self._write(image, path, may_request_permission=True)

    def _write(self, image: QImage, path: Path, may_request_permission: bool) -> Optional[Path]:
        success, message = export_png(image, path)
        if success:
            self.export_finished.emit(str(path))
            return path

        if may_request_permission and not self._permission.has_permission():
            logger.info("Write failed without storage permission, requesting it")
            self._pending.append((image, path))
            self.permission_requested.emit()
            self._permission.request_permission()
            return None

        self.export_failed.emit(message)
        return None

    def _on_permission_result(self, granted: bool):
        """Retry pending writes once if permission was granted."""
        pending, self._pending = self._pending, []
        if not pending:
            return

        if not granted:
            logger.warning("Storage permission denied, dropping %d export(s)", len(pending))
            for _, path in pending:
                self.export_failed.emit(f"Storage permission denied: {path.name} not saved")
            return

        for image, path in pending:
            self._write(image, path, may_request_permission=False)


__all__ = ['generate_export_filename', 'encode_png', 'export_png', 'ExportService']
