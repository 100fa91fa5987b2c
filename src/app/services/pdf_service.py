"""PDF Generation Service Interface

Defines the contract for the drawing sink that turns layout instructions
into a document.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from src.app.layout.instructions import Instruction


class PdfService(ABC):
    """
    Service interface for PDF generation

    Consumes an ordered stream of drawing instructions and produces the
    finished document. Never read back from except for the final bytes.
    """

    @abstractmethod
    def build_document(
        self,
        instructions: Sequence[Instruction],
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> bytes:
        """
        Draw instructions onto a single page and finalize the document

        Args:
            instructions: Ordered drawing instructions (top-left origin, points)
            title: Document title metadata
            author: Document author metadata

        Returns:
            PDF document as bytes
        """
        pass
