from enum import Enum


class ToastVariant(str, Enum):
    """Severity of a toast notification shown by the storefront UI."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
