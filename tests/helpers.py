import io
from typing import Dict, Iterable, Optional, Sequence, Tuple

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.textTools import Tag
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

BASE_CMAP = {
    0x0020: "space",
    0x0041: "A",
    0x0056: "V",
    0x0061: "a",
    0x0066: "f",
    0x0069: "i",
}


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def build_font(
    *,
    family: str = "Acme Sans",
    style: str = "Regular",
    weight_class: Optional[int] = 400,
    fs_selection: int = 0x0040,
    extra_codepoints: Iterable[int] = (),
    extra_glyphs: Sequence[str] = (),
    features: Optional[str] = None,
    axes: Optional[Sequence[Tuple[str, float, float, float, str]]] = None,
    instances: Optional[Sequence[Dict]] = None,
    drop_tables: Sequence[str] = (),
    name_strings: Optional[Dict[str, str]] = None,
    os2_values: Optional[Dict] = None,
    flavor: Optional[str] = None,
) -> bytes:
    """Build a small TrueType font in memory and return its bytes."""
    cmap = dict(BASE_CMAP)
    for codepoint in extra_codepoints:
        cmap[codepoint] = f"uni{codepoint:04X}"

    glyph_order = [".notdef"] + sorted(set(cmap.values()))
    for name in extra_glyphs:
        if name not in glyph_order:
            glyph_order.append(name)

    glyphs = {
        name: (_empty_glyph() if name in (".notdef", "space") else _box_glyph())
        for name in glyph_order
    }

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (500, 50) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)

    names = {"familyName": family, "styleName": style}
    names.update(name_strings or {})
    fb.setupNameTable(names)

    os2 = {
        "sTypoAscender": 800,
        "sTypoDescender": -200,
        "usWinAscent": 800,
        "usWinDescent": 200,
        "sxHeight": 500,
        "sCapHeight": 700,
        "fsSelection": fs_selection,
    }
    if weight_class is not None:
        os2["usWeightClass"] = weight_class
    os2.update(os2_values or {})
    fb.setupOS2(**os2)
    fb.setupPost()

    if axes:
        fb.setupFvar(list(axes), list(instances or []))

    if features:
        fb.addOpenTypeFeatures(features)

    for tag in drop_tables:
        if tag in fb.font:
            del fb.font[tag]

    if flavor:
        fb.font.flavor = flavor

    out = io.BytesIO()
    fb.save(out)
    return out.getvalue()


def corrupt_font(signature: bytes = b"\x00\x01\x00\x00", size: int = 200) -> bytes:
    """Valid signature followed by bytes that are not a table directory."""
    return signature + b"\xff" * (size - len(signature))


def corrupt_table(data: bytes, tag: str, payload: bytes = b"\xff\xff") -> bytes:
    """Overwrite the start of one table, leaving the table directory intact."""
    offset = TTFont(io.BytesIO(data), lazy=True).reader.tables[Tag(tag)].offset
    patched = bytearray(data)
    patched[offset : offset + len(payload)] = payload
    return bytes(patched)


CYRILLIC_SAMPLE = (0x0410, 0x0411, 0x0412, 0x0413, 0x0414)
GREEK_SAMPLE = (0x0391, 0x0392, 0x0393)
HIRAGANA_SAMPLE = (0x3042, 0x3044, 0x3046, 0x3048)
