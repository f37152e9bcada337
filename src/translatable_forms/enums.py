"""Enumeration type definitions"""

from enum import Enum


class FormMode(str, Enum):
    """Which record page a form is rendered on"""

    CREATE = "create"
    EDIT = "edit"


class ContainerType(str, Enum):
    SECTION = "section"
    GRID = "grid"
    GROUP = "group"
    FIELDSET = "fieldset"
    TABS = "tabs"
    TAB = "tab"
