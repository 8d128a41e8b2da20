"""
Resume Parser - Reads resume files and hands their text to the extractor.
Supports PDF and plain text resumes.
"""

from pathlib import Path
from typing import Optional
import logging

import pdfplumber

from .models import ProfileFragment
from .resume_extractor import ResumeExtractor


class ResumeParser:
    """Parses resume files into profile fragments."""

    TEXT_EXTENSIONS = (".txt", ".md")

    def __init__(self, extractor: Optional[ResumeExtractor] = None):
        self.extractor = extractor or ResumeExtractor()
        self.logger = logging.getLogger(self.__class__.__name__)

    def parse_file(self, file_path: str) -> ProfileFragment:
        """Parse a file and extract profile information."""
        return self.extractor.extract(self.read_text(file_path))

    def read_text(self, file_path: str) -> str:
        """Return the raw text of a resume file."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        extension = path.suffix.lower()

        if extension == ".pdf":
            return self.extract_pdf_text(path)
        elif extension in self.TEXT_EXTENSIONS:
            return path.read_text(encoding="utf-8")
        else:
            raise ValueError(f"Unsupported file format: {extension}")

    def extract_pdf_text(self, path: Path) -> str:
        """Extract the text of every page of a PDF, one page per block."""
        pages = []
        with pdfplumber.open(path) as pdf:
            for page in pdf.pages:
                pages.append(page.extract_text() or "")

        self.logger.debug(f"Read {len(pages)} pages from {path.name}")
        return "\n".join(pages)
