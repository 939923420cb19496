from enum import Enum


class SlotName(str, Enum):
    """Names of the key-value tier slots exposed to the host."""

    FILE_LABEL = "fileLabel"
    NAV_HEADER = "navheader"
    OPTIONS = "analysisOptions"
    LOCALE = "locale"
    OUTLINE_COLLAPSED = "outlineCollapsed"
