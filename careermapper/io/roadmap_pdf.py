from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, List, Sequence, Tuple, Union

from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from careermapper.roadmap import CareerRoadmap, RoadmapLine

# A4 in PDF points
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
MARGIN = 56
LEADING = 1.4

_Placed = Tuple[float, float, int, str]  # x, y, font size, text


def _font_resources() -> DictionaryObject:
    helvetica = DictionaryObject({
        NameObject("/Type"): NameObject("/Font"),
        NameObject("/Subtype"): NameObject("/Type1"),
        NameObject("/BaseFont"): NameObject("/Helvetica"),
        NameObject("/Encoding"): NameObject("/WinAnsiEncoding"),
    })
    return DictionaryObject({NameObject("/Font"): DictionaryObject({NameObject("/F1"): helvetica})})


def _pdf_string(text: str) -> bytes:
    # Standard Helvetica has no rupee glyph; everything else maps onto cp1252.
    raw = text.replace("₹", "Rs.").encode("cp1252", errors="replace")
    return raw.replace(b"\\", b"\\\\").replace(b"(", b"\\(").replace(b")", b"\\)")


def layout_pages(lines: Sequence[RoadmapLine]) -> List[List[_Placed]]:
    """Place lines top-down, starting a new page when the bottom margin is reached."""
    pages: List[List[_Placed]] = []
    current: List[_Placed] = []
    y = float(PAGE_HEIGHT - MARGIN)
    for line in lines:
        step = line.size * LEADING + line.space_before
        if current and y - step < MARGIN:
            pages.append(current)
            current = []
            y = float(PAGE_HEIGHT - MARGIN)
        y -= step
        current.append((float(MARGIN + line.indent), y, line.size, line.text))
    if current or not pages:
        pages.append(current)
    return pages


def _content_stream(placed: Sequence[_Placed]) -> bytes:
    ops = [b"BT"]
    for x, y, size, text in placed:
        ops.append(b"/F1 %d Tf" % size)
        ops.append(b"1 0 0 1 %.2f %.2f Tm" % (x, y))
        ops.append(b"(" + _pdf_string(text) + b") Tj")
    ops.append(b"ET")
    return b"\n".join(ops)


def write_roadmap_pdf(roadmap: CareerRoadmap, out: Union[str, Path, BinaryIO]) -> int:
    """Render the roadmap to PDF. Returns the number of pages written."""
    writer = PdfWriter()
    pages = layout_pages(roadmap.to_lines())
    for placed in pages:
        page = writer.add_blank_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        page[NameObject("/Resources")] = _font_resources()
        stream = DecodedStreamObject()
        stream.set_data(_content_stream(placed))
        page.replace_contents(stream)

    if isinstance(out, (str, Path)):
        with Path(out).open("wb") as f:
            writer.write(f)
    else:
        writer.write(out)
    return len(pages)
