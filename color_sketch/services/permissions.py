"""
Permissions - Storage permission gate for exports

Desktop stand-in for a mobile "write external storage" permission.
Permission is granted when the export folder exists and is writable;
requesting it tries to create the folder. The result is delivered
asynchronously through the permission_result signal.
"""

import os
import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


class StoragePermission(QObject):
    """
    Interface for the storage permission collaborator.

    Subclasses implement has_permission() and request_permission().
    request_permission() must not block; the outcome is emitted later
    through permission_result.
    """

    permission_result = pyqtSignal(bool)  # granted

    def has_permission(self) -> bool:
        raise NotImplementedError

    def request_permission(self) -> None:
        raise NotImplementedError


class ExternalStoragePermission(StoragePermission):
    """Permission to write into a shared storage folder."""

    def __init__(self, root: Path, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._root = Path(root)
        self._request_pending = False

    @property
    def root(self) -> Path:
        return self._root

    def has_permission(self) -> bool:
        """Check if the storage root exists and is writable."""
        return self._root.is_dir() and os.access(self._root, os.W_OK)

    def request_permission(self) -> None:
        """Ask for write access; the answer arrives on the next event loop turn."""
        if self._request_pending:
            return
        self._request_pending = True
        logger.info("Requesting write access to %s", self._root)
        QTimer.singleShot(0, self._resolve_request)

    def _resolve_request(self):
        """Try to create the storage root and emit the outcome."""
        self._request_pending = False
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create storage folder %s: %s", self._root, e)

        granted = self.has_permission()
        if granted:
            logger.info("Storage permission granted for %s", self._root)
        else:
            logger.warning("Storage permission denied for %s", self._root)
        self.permission_result.emit(granted)


__all__ = ['StoragePermission', 'ExternalStoragePermission']
