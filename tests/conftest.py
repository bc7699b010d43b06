from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys
import zlib

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PAGE_CONTENT = b"BT /F1 12 Tf 72 712 Td (Hello from a content stream) Tj ET"


def build_pdf(stream_data: bytes, *, filter_name: str | None = "/FlateDecode") -> bytes:
    """Assemble a one page PDF whose page content is *stream_data*.

    Every dictionary is flat so the whole file stays inside the grammar the
    tokenizer understands.
    """

    stream_dict = f"<< /Length {len(stream_data)}"
    if filter_name:
        stream_dict += f" /Filter {filter_name}"
    stream_dict += " >>"
    bodies = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 200] /Contents 4 0 R >>",
        stream_dict.encode("ascii") + b"\nstream\n" + stream_data + b"\nendstream",
    ]

    out = bytearray(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")
    offsets = []
    for number, body in enumerate(bodies, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(bodies) + 1}\n".encode("ascii")
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("ascii")
    out += f"trailer\n<< /Size {len(bodies) + 1} /Root 1 0 R >>\n".encode("ascii")
    out += f"startxref\n{xref_offset}\n%%EOF\n".encode("ascii")
    return bytes(out)


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, stream_data: bytes, **kwargs) -> Path:
        path = tmp_path / filename
        path.write_bytes(build_pdf(stream_data, **kwargs))
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", zlib.compress(PAGE_CONTENT))


@pytest.fixture()
def uncompressed_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("plain.pdf", b"q 1 0 0 1 0 0 cm Q", filter_name=None)


@pytest.fixture()
def page_content() -> str:
    return PAGE_CONTENT.decode("ascii")
