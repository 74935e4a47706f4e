"""Services for Color Sketch"""

from .permissions import StoragePermission, ExternalStoragePermission
from .export_service import ExportService, export_png, encode_png, generate_export_filename

__all__ = [
    'StoragePermission',
    'ExternalStoragePermission',
    'ExportService',
    'export_png',
    'encode_png',
    'generate_export_filename',
]
