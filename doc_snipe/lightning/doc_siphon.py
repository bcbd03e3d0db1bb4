"""
doc_siphon.py - Pulls plain text out of .doc / .docx files.

.doc goes through the antiword binary (Latin-1 output, decoded here),
.docx through python-docx. Any failure comes back as None so one broken
document never stops a run.
"""

import logging
import shutil
import subprocess
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

DOC_EXTENSIONS = {".doc"}
DOCX_EXTENSIONS = {".docx"}
DOCUMENT_EXTENSIONS = DOC_EXTENSIONS | DOCX_EXTENSIONS

ANTIWORD_TIMEOUT = 30

# Check if antiword is available (cached at import time)
ANTIWORD_PATH = shutil.which("antiword")


def extractor_available(suffix: str) -> bool:
    """Can this suffix be turned into text on this machine?"""
    suffix = suffix.lower()
    if suffix in DOC_EXTENSIONS:
        return ANTIWORD_PATH is not None
    return suffix in DOCX_EXTENSIONS


def extract_doc(path: Path) -> str | None:
    """Legacy Word 97-2003 via antiword."""
    if not ANTIWORD_PATH:
        logger.warning(f"antiword not installed, skipping {path}")
        return None

    try:
        result = subprocess.run(
            [ANTIWORD_PATH, str(path)],
            capture_output=True,
            timeout=ANTIWORD_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"antiword timed out after {ANTIWORD_TIMEOUT}s on {path}")
        return None
    except OSError as e:
        logger.warning(f"antiword failed on {path}: {e}")
        return None

    if result.returncode != 0:
        logger.warning(f"antiword exited {result.returncode} on {path}")
        return None
    return result.stdout.decode("iso-8859-1")


def extract_docx(path: Path) -> str | None:
    """Word 2007+ via python-docx: paragraphs, then table rows."""
    from docx import Document
    from docx.opc.exceptions import PackageNotFoundError
    from lxml.etree import XMLSyntaxError

    try:
        doc = Document(str(path))
    except (
        PackageNotFoundError, zipfile.BadZipFile, XMLSyntaxError, KeyError, ValueError, OSError,
    ) as e:
        logger.warning(f"python-docx could not open {path}: {e}")
        return None

    parts = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.append("\t".join(cell.text for cell in row.cells))
    return "\n".join(parts)


def extract_text(path: Path) -> str | None:
    """Dispatcher: route to antiword or python-docx by suffix."""
    suffix = path.suffix.lower()
    if suffix in DOC_EXTENSIONS:
        return extract_doc(path)
    if suffix in DOCX_EXTENSIONS:
        return extract_docx(path)
    logger.debug(f"No extractor for {path}")
    return None
