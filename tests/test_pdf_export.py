from pdf_export import generate_pdf, item_colors, mm_to_pt, parse_rgb
from optimizer import generate_layout_options


def test_mm_to_pt():
    assert abs(mm_to_pt(25.4) - 72.0) < 1e-9


def test_parse_rgb():
    c = parse_rgb("F00")
    assert (c.red, c.green, c.blue) == (1.0, 0.0, 0.0)
    c = parse_rgb("#00ff00")
    assert (c.red, c.green, c.blue) == (0.0, 1.0, 0.0)
    # malformed falls back to black
    c = parse_rgb("zz")
    assert (c.red, c.green, c.blue) == (0.0, 0.0, 0.0)
    c = parse_rgb("grey")
    assert (c.red, c.green, c.blue) == (0.0, 0.0, 0.0)
    c = parse_rgb("zzz")
    assert (c.red, c.green, c.blue) == (0.0, 0.0, 0.0)


def test_item_colors_cycle(mixed_items):
    colors = item_colors(mixed_items * 2)
    assert set(colors) == {it.id for it in mixed_items}


def test_generate_pdf_writes_file(tmp_path, dieline, mixed_items):
    options = generate_layout_options(mixed_items, dieline)
    out = tmp_path / "runs.pdf"
    generate_pdf(str(out), options, options[0], dieline, mixed_items, cfg={})
    data = out.read_bytes()
    assert data.startswith(b"%PDF")


def test_generate_pdf_without_summary_portrait(tmp_path, dieline, two_items):
    options = generate_layout_options(two_items, dieline)
    out = tmp_path / "runs.pdf"
    cfg = {"generate-summary": "false", "orientation": "v", "margin": "15"}
    generate_pdf(str(out), options, options[-1], dieline, two_items, cfg=cfg)
    assert out.stat().st_size > 0
