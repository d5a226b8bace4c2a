from __future__ import annotations

import logging
import shutil
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import List

import docx
import pytesseract
from docx.opc.exceptions import PackageNotFoundError
from PIL import Image
from PyPDF2 import PdfReader

from .errors import DocumentExtractionError
from .text_utils import clean_text, count_words


logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp"}
SUPPORTED_SUFFIXES = {".txt", ".pdf", ".docx"} | IMAGE_SUFFIXES

# below this many characters the PDF text layer is treated as missing
_MIN_PDF_TEXT = 200


@dataclass(frozen=True)
class ExtractedDocument:
    text: str
    source_type: str
    word_count: int
    used_ocr: bool = False


def _require_tesseract() -> None:
    if shutil.which("tesseract") is None:
        raise DocumentExtractionError(
            "OCR requested but Tesseract is not installed or not on PATH. "
            "Install Tesseract OCR and ensure 'tesseract' is available in PATH."
        )


def _ocr_images(images) -> List[str]:
    _require_tesseract()
    try:
        return [pytesseract.image_to_string(img) for img in images]
    except pytesseract.TesseractError as e:
        raise DocumentExtractionError(f"Tesseract OCR failed: {e}") from e


def _from_pdf(path: Path, ocr_fallback: bool) -> tuple[str, bool]:
    try:
        reader = PdfReader(str(path))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise DocumentExtractionError(f"PyPDF2 failed to read PDF: {e}") from e

    text = "\n".join(pages).strip()
    if len(text) >= _MIN_PDF_TEXT or not ocr_fallback:
        if not text:
            raise DocumentExtractionError("PDF contains no extractable text")
        return text, False

    logger.info("PDF text layer too small (%d chars), running OCR on %s", len(text), path.name)
    from pdf2image import convert_from_path

    try:
        images = convert_from_path(str(path))
    except Exception as e:
        raise DocumentExtractionError(
            "pdf2image failed to convert pages; Poppler must be installed and on PATH. "
            f"Underlying error: {e}"
        ) from e
    return "\n".join(_ocr_images(images)).strip(), True


def _from_image(path: Path) -> str:
    try:
        with Image.open(path) as img:
            return _ocr_images([img])[0]
    except OSError as e:
        raise DocumentExtractionError(f"Could not open image {path.name}: {e}") from e


def _from_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentExtractionError(f"{path.name} is not valid UTF-8 text: {e}") from e


def _from_docx(path: Path) -> str:
    try:
        document = docx.Document(str(path))
    except (PackageNotFoundError, zipfile.BadZipFile) as e:
        raise DocumentExtractionError(f"Could not open Word document {path.name}: {e}") from e
    return "\n".join(p.text for p in document.paragraphs)


def extract_text(path: str | Path, *, ocr_fallback: bool = False) -> ExtractedDocument:
    """Extract plain text from an uploaded document.

    Supports `.txt`, `.pdf` (text layer, optional OCR fallback), `.docx` and
    common image formats (always OCR).
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    suffix = path.suffix.lower()
    used_ocr = False
    if suffix == ".txt":
        raw = _from_txt(path)
    elif suffix == ".pdf":
        raw, used_ocr = _from_pdf(path, ocr_fallback)
    elif suffix == ".docx":
        raw = _from_docx(path)
    elif suffix in IMAGE_SUFFIXES:
        raw = _from_image(path)
        used_ocr = True
    else:
        raise DocumentExtractionError(f"Unsupported file type: {suffix or path.name}")

    text = clean_text(raw)
    return ExtractedDocument(
        text=text,
        source_type=suffix.lstrip("."),
        word_count=count_words(text),
        used_ocr=used_ocr,
    )
