"""Headless editor implementation backed by a TextDocument."""

from typing import Dict, Iterable, List, Optional

from ..interfaces.editor import ITextEditor
from ..models.document import Selection, TextDocument


class InMemoryEditor(ITextEditor):
    """
    Editor over an in-memory document.

    Prompt answers are taken in order from ``answers``; when they run
    out the prompt is treated as dismissed.
    """

    def __init__(
        self,
        document: TextDocument,
        selection: Selection,
        answers: Optional[Iterable[Optional[str]]] = None,
    ):
        self._document = document
        self._selection = selection
        self._answers: List[Optional[str]] = list(answers or [])
        self.prompts: List[Dict[str, object]] = []
        self.errors: List[str] = []
        self.edit_count = 0

    @property
    def document(self) -> TextDocument:
        return self._document

    @property
    def selection(self) -> Selection:
        return self._selection

    @selection.setter
    def selection(self, value: Selection) -> None:
        self._selection = value

    def show_input_box(
        self,
        prompt: str,
        value: str = "",
        ignore_focus_out: bool = False,
    ) -> Optional[str]:
        self.prompts.append(
            {"prompt": prompt, "value": value, "ignore_focus_out": ignore_focus_out}
        )
        return self._answers.pop(0) if self._answers else None

    def replace_lines(self, replacements: Dict[int, str]) -> bool:
        for number in replacements:
            self._document.line_at(number)
        for number, content in replacements.items():
            self._document.replace_line(number, content)
        self.edit_count += 1
        return True

    def show_error_message(self, message: str) -> None:
        self.errors.append(message)
