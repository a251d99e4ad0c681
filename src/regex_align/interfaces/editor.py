"""Editor integration interface for regex-based alignment."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..models.document import Selection, TextDocument


class ITextEditor(ABC):
    """
    Abstract interface for the editor hosting the align command.

    Implementations expose the active document and selection, prompt the
    user for input, and apply line replacements as one edit.
    """

    @property
    @abstractmethod
    def document(self) -> TextDocument:
        """The document being edited."""
        pass

    @property
    @abstractmethod
    def selection(self) -> Selection:
        """The primary selection."""
        pass

    @abstractmethod
    def show_input_box(
        self,
        prompt: str,
        value: str = "",
        ignore_focus_out: bool = False,
    ) -> Optional[str]:
        """
        Ask the user for a line of input.

        Args:
            prompt: Text explaining what to enter.
            value: Prefilled value.
            ignore_focus_out: Keep the prompt open when focus moves away.

        Returns:
            The entered text, or None if the prompt was dismissed.
        """
        pass

    @abstractmethod
    def replace_lines(self, replacements: Dict[int, str]) -> bool:
        """
        Replace the content of whole lines in a single edit.

        Args:
            replacements: Absolute line number to new line content,
                without terminators.

        Returns:
            True if the edit was applied.
        """
        pass

    @abstractmethod
    def show_error_message(self, message: str) -> None:
        """Surface an error to the user."""
        pass
