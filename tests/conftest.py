import zipfile
from pathlib import Path

import pytest
from docx import Document

from doc_snipe.lightning import blitz_hunt


def numbered_text(total: int, hits: dict[int, str]) -> str:
    """total filler lines, with hits[line_no] substituted in (1-indexed)."""
    lines = [hits.get(i, f"filler line {i}") for i in range(1, total + 1)]
    return "\n".join(lines) + "\n"


@pytest.fixture
def five_line_text() -> str:
    return numbered_text(5, {1: "om dharma kshetre", 4: "the path of yoga"})


@pytest.fixture
def fake_extract(monkeypatch):
    """Replace text extraction with a filename -> text lookup."""
    texts: dict[str, str | None] = {}

    def _extract(path: Path):
        return texts.get(path.name)

    monkeypatch.setattr(blitz_hunt, "extract_text", _extract)
    return texts


@pytest.fixture
def corpus(tmp_path, fake_extract) -> Path:
    """
    Small document tree:

        corpus/a.docx      dharma + yoga 2 lines apart
        corpus/b.doc       dharma only
        corpus/notes.txt   ignored
        corpus/sub/c.docx  yoga then dharma, 1 line apart
        corpus/sub/~$c.docx  Word lock file, ignored
        corpus/.git/d.docx ignored dir
    """
    root = tmp_path / "corpus"
    (root / "sub").mkdir(parents=True)
    (root / ".git").mkdir()
    for rel in ["a.docx", "b.doc", "notes.txt", "sub/c.docx", "sub/~$c.docx", ".git/d.docx"]:
        (root / rel).write_bytes(b"")

    fake_extract["a.docx"] = numbered_text(8, {2: "dharma", 4: "yoga"})
    fake_extract["b.doc"] = numbered_text(4, {3: "Dharma alone"})
    fake_extract["c.docx"] = numbered_text(3, {1: "yoga", 2: "dharma"})
    fake_extract["d.docx"] = "dharma\nyoga\n"
    return root


def write_docx(path: Path, paragraphs: list[str]) -> Path:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    doc.save(str(path))
    return path


def corrupt_docx(path: Path) -> Path:
    """A real .docx whose word/document.xml is no longer well-formed."""
    good = write_docx(path.with_name(f"good-{path.name}"), ["dharma"])
    with zipfile.ZipFile(good) as src, zipfile.ZipFile(path, "w") as dst:
        for item in src.infolist():
            data = src.read(item.filename)
            if item.filename == "word/document.xml":
                data = b"<w:document><unclosed>"
            dst.writestr(item, data)
    good.unlink()
    return path
