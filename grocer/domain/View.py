"""Top-level view routing: which view is shown and whether the import modal is open. Never persisted."""
from enum import Enum


class View(str, Enum):
    LISTS = 'LISTS'
    RECIPES = 'RECIPES'


class ViewState:
    def __init__(self, view: View = View.LISTS, import_modal_open: bool = False):
        self.view = View(view)
        self.import_modal_open = import_modal_open

    def switch(self, view) -> "ViewState":
        self.view = View(view)
        return self

    def open_import(self) -> "ViewState":
        self.import_modal_open = True
        return self

    def close_import(self) -> "ViewState":
        self.import_modal_open = False
        return self

    def to_dict(self):
        return {"view": self.view.value, "import_modal_open": self.import_modal_open}
