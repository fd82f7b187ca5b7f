import hashlib
import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)


def compute_content_hash(content: bytes) -> str:
    """SHA-256 hex digest of the original document bytes."""
    return hashlib.sha256(content).hexdigest()


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text(content: bytes, file_name: str = "") -> str:
    """Decode an uploaded document to text.

    PDFs go through pdfplumber; anything else, or a PDF that fails to parse,
    is decoded as UTF-8 with replacement characters.
    """
    if file_name.lower().endswith(".pdf"):
        try:
            text = extract_text_pdf(content)
            logger.info("Extracted %d characters from PDF %s", len(text), file_name)
            return text
        except Exception as e:
            logger.warning("PDF parsing failed for %s: %s. Reading as text.", file_name, e)

    return content.decode("utf-8", errors="replace")
