from enum import Enum


class ComplexView(str, Enum):
    """Enumerate the view identifiers a caller may request when fetching complex data."""

    RAW = "RAW_VIEW"
    TEXT = "TEXT_VIEW"
    TITLE = "TITLE_VIEW"
    URI = "URI_VIEW"
    HTML = "HTML_VIEW"
    PREVIEW = "PREVIEW_VIEW"
