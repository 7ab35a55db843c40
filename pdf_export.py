# pdf_export.py - labelgang ver1.0
#
# This file handles all PDF output:
# - Summary page with one table row per layout option
# - One page per run of the chosen option: lanes across the roll coloured
#   per item, plus a slot table
# - Lucida Sans Unicode fonts + monospace for numeric alignment

from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4, portrait, landscape
from reportlab.lib.colors import Color, black, white
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from typing import Dict, List, Optional

from models import DEFAULT_PRESS, Dieline, Item, LayoutOption, PressConfig, ProposedRun
from geometry import labels_per_frame, lane_labels_per_frame
from io_utils import parse_bool, parse_pdf_margin
from optimizer import format_layout_summary
from timing import estimate_production_time

import os


# ------------------------------------------------------------
# mm -> pt
# ------------------------------------------------------------
def mm_to_pt(mm: float) -> float:
    return mm * 72.0 / 25.4


# ------------------------------------------------------------
# Parse hex RGB like "F00", "FF0000"
# ------------------------------------------------------------
def parse_rgb(hex_str: str) -> Color:
    s = hex_str.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6 or any(ch not in "0123456789abcdefABCDEF" for ch in s):
        return black
    r = int(s[0:2], 16) / 255
    g = int(s[2:4], 16) / 255
    b = int(s[4:6], 16) / 255
    return Color(r, g, b)


# One colour per item, cycled in input order
ITEM_PALETTE = [
    "3B82F6", "10B981", "F59E0B", "A855F7",
    "EC4899", "06B6D4", "F97316", "14B8A6",
]


def item_colors(items: List[Item]) -> Dict[str, Color]:
    return {
        it.id: parse_rgb(ITEM_PALETTE[i % len(ITEM_PALETTE)])
        for i, it in enumerate(items)
    }


# ------------------------------------------------------------
# FONT LOADING (Lucida Sans Unicode)
# ------------------------------------------------------------
# Lucida Sans Unicode is used when found on the system, otherwise
# Helvetica. Numeric table cells use builtin Courier.

LUCIDA_NAME = "LucidaSansUnicode_1_0"
MONO_NAME = "Courier"


def register_fonts():
    """
    Try to register Lucida Sans Unicode. If the TTF is not available or
    cannot be read, fall back to Helvetica.
    """
    global LUCIDA_NAME

    possible = [
        "/usr/share/fonts/truetype/lucida/LucidaSansUnicode.ttf",
        "/usr/share/fonts/truetype/LucidaSansUnicode.ttf",
        "/Library/Fonts/LucidaSansUnicode.ttf",
        "C:/Windows/Fonts/l_10646.ttf",
        "C:/Windows/Fonts/LSANS.TTF",
    ]

    lucida_path = next((p for p in possible if os.path.isfile(p)), None)

    if lucida_path:
        try:
            pdfmetrics.registerFont(TTFont(LUCIDA_NAME, lucida_path))
            return
        except TTFError:
            pass
    LUCIDA_NAME = "Helvetica"


# ------------------------------------------------------------
# TABLE DRAWING ENGINE (FULL-WIDTH, STACKED TABLES)
# ------------------------------------------------------------

def draw_table(
    c: canvas.Canvas,
    x0_pt: float, y0_pt: float,
    col_widths: List[float],
    row_height_pt: float,
    data: List[List[str]],
    font_size: float = 10,
    numeric_cols: Optional[List[int]] = None
):
    """
    Draws a table with a black grid. Numeric columns use the monospace
    font and are right aligned. x0_pt, y0_pt = top-left corner.
    """
    numeric_cols = numeric_cols or []

    for r, row in enumerate(data):
        y_top = y0_pt - r * row_height_pt

        for c_idx, w in enumerate(col_widths):
            x_left = x0_pt + sum(col_widths[:c_idx])

            c.setStrokeColor(black)
            c.setLineWidth(1)
            c.rect(x_left, y_top - row_height_pt, w, row_height_pt, stroke=1, fill=0)

            text = row[c_idx] if row[c_idx] is not None else ""
            font_name = MONO_NAME if c_idx in numeric_cols else LUCIDA_NAME
            c.setFont(font_name, font_size)
            c.setFillColor(black)

            ty = y_top - row_height_pt + (row_height_pt * 0.33)
            if c_idx in numeric_cols:
                tw = pdfmetrics.stringWidth(text, font_name, font_size)
                c.drawString(x_left + w - tw - 3, ty, text)
            else:
                c.drawString(x_left + 3, ty, text)


# ------------------------------------------------------------
# SUMMARY PAGE
# ------------------------------------------------------------

def draw_summary_page(
    c: canvas.Canvas,
    page_w_pt: float,
    page_h_pt: float,
    margin_mm: float,
    options: List[LayoutOption],
    press: PressConfig
):
    margin_pt = mm_to_pt(margin_mm)
    y = page_h_pt - margin_pt

    c.setFont(LUCIDA_NAME, 20)
    c.setFillColor(black)
    c.drawString(margin_pt, y, "labelgang layout options")
    y -= mm_to_pt(15)

    table_width = page_w_pt - 2 * margin_pt
    row_h = mm_to_pt(7)

    data = [["Option", "Runs", "Meters", "Frames", "Waste (m)",
             "Material", "Print", "Labor", "Overall", "Minutes"]]
    for o in options:
        data.append([
            o.id,
            f"{o.run_count}",
            f"{o.total_meters:.2f}",
            f"{o.total_frames}",
            f"{o.total_waste_meters:.2f}",
            f"{o.material_efficiency_score}%",
            f"{o.print_efficiency_score}%",
            f"{o.labor_efficiency_score}%",
            f"{o.overall_score}%",
            f"{estimate_production_time(o, press)}",
        ])

    first = table_width * 0.28
    rest = (table_width - first) / 9
    draw_table(c, margin_pt, y, [first] + [rest] * 9, row_h, data,
               font_size=9, numeric_cols=list(range(1, 10)))
    y -= row_h * len(data) + mm_to_pt(8)

    # reasoning under the table
    c.setFont(LUCIDA_NAME, 9)
    for o in options:
        c.drawString(margin_pt, y, f"{o.id}: {format_layout_summary(o)}")
        y -= mm_to_pt(5)
        c.drawString(margin_pt + mm_to_pt(5), y, o.reasoning)
        y -= mm_to_pt(7)


# ------------------------------------------------------------
# RUN PAGE: lanes across the roll
# ------------------------------------------------------------

def draw_lane(c: canvas.Canvas,
              x_pt: float, y_top_pt: float,
              w_pt: float, h_pt: float,
              fill_ratio: float,
              color: Color, empty_color: Color,
              label: str, font_size: float = 8):
    """
    Lane outline plus a filled bar for the share of the run length this
    slot actually needs.
    """
    c.setStrokeColor(black)
    c.setFillColor(empty_color)
    c.rect(x_pt, y_top_pt - h_pt, w_pt, h_pt, stroke=1, fill=1)

    if fill_ratio > 0:
        bar_h = h_pt * min(1.0, fill_ratio)
        c.setFillColor(color)
        c.rect(x_pt, y_top_pt - bar_h, w_pt, bar_h, stroke=0, fill=1)

    # white padded label box, centred
    c.setFont(LUCIDA_NAME, font_size)
    tw = pdfmetrics.stringWidth(label, LUCIDA_NAME, font_size)
    box_w = min(w_pt - 2, tw + font_size * 0.8)
    box_h = font_size * 1.5
    cx = x_pt + w_pt / 2
    cy = y_top_pt - h_pt / 2
    c.setFillColor(white)
    c.rect(cx - box_w / 2, cy - box_h / 2, box_w, box_h, stroke=0, fill=1)
    c.setFillColor(black)
    c.drawCentredString(cx, cy - font_size * 0.35, label)


def draw_run_page(c: canvas.Canvas,
                  page_w_pt: float, page_h_pt: float,
                  margin_mm: float,
                  option: LayoutOption,
                  run: ProposedRun,
                  dieline: Dieline,
                  items: List[Item],
                  press: PressConfig,
                  colors: Dict[str, Color],
                  empty_color: Color):
    margin_pt = mm_to_pt(margin_mm)
    names = {it.id: it.name for it in items}

    # HEADER
    c.setFont(LUCIDA_NAME, 14)
    c.setFillColor(black)
    c.drawString(
        margin_pt, page_h_pt - margin_pt - 12,
        f"Run {run.run_number}/{option.run_count} ({option.id})"
    )
    printed = run.frames * labels_per_frame(dieline, press)
    c.setFont(LUCIDA_NAME, 10)
    c.drawString(
        margin_pt, page_h_pt - margin_pt - 28,
        f"{run.meters:.2f} m, {run.frames} frames, {printed:,} labels printed, "
        f"roll {dieline.roll_width_mm:g} mm, {dieline.columns_across} across"
    )

    # LANES
    diagram_top = page_h_pt - margin_pt - mm_to_pt(18)
    diagram_h = (page_h_pt - 2 * margin_pt) * 0.45
    usable_w = page_w_pt - 2 * margin_pt
    slots = dieline.columns_across
    gap_pt = mm_to_pt(2)
    lane_w = (usable_w - gap_pt * (slots - 1)) / slots

    by_slot = {a.slot: a for a in run.slot_assignments}
    longest = run.max_slot_quantity()

    for s in range(slots):
        x = margin_pt + s * (lane_w + gap_pt)
        a = by_slot.get(s)
        if a is None:
            draw_lane(c, x, diagram_top, lane_w, diagram_h, 0.0,
                      empty_color, empty_color, f"{s + 1}: empty")
            continue
        ratio = a.quantity_in_slot / longest if longest else 0.0
        label = f"{s + 1}: {names.get(a.item_id, a.item_id)} x {a.quantity_in_slot:,}"
        draw_lane(c, x, diagram_top, lane_w, diagram_h, ratio,
                  colors.get(a.item_id, black), empty_color, label)

    # SLOT TABLE
    per_lane = run.frames * lane_labels_per_frame(dieline, press)
    data = [["Slot", "Item", "Quantity", "Printed", "Overrun"]]
    for a in sorted(run.slot_assignments, key=lambda a: a.slot):
        data.append([
            f"{a.slot + 1}",
            names.get(a.item_id, a.item_id),
            f"{a.quantity_in_slot:,}",
            f"{per_lane:,}",
            f"{per_lane - a.quantity_in_slot:,}",
        ])

    table_top = diagram_top - diagram_h - mm_to_pt(10)
    w = usable_w
    draw_table(c, margin_pt, table_top,
               [w * 0.1, w * 0.42, w * 0.16, w * 0.16, w * 0.16],
               mm_to_pt(6), data, font_size=9, numeric_cols=[0, 2, 3, 4])


# ------------------------------------------------------------
# FINAL PDF GENERATOR
# ------------------------------------------------------------

def generate_pdf(
    output_path: str,
    options: List[LayoutOption],
    chosen: LayoutOption,
    dieline: Dieline,
    items: List[Item],
    cfg: Dict[str, str],
    press: Optional[PressConfig] = None,
    margin_mm: Optional[float] = None
):
    """
    Generates the complete PDF:
      - optional summary page (all options)
      - one page per run of the chosen option
    """
    press = press or DEFAULT_PRESS
    register_fonts()

    gen_summary = parse_bool(cfg.get("generate-summary", "true"))
    empty_color = parse_rgb(cfg.get("empty-color", "EEE"))
    if margin_mm is None:
        margin_mm = parse_pdf_margin(cfg)

    orientation = (cfg.get("orientation", "h") or "h").lower()
    pagesize = landscape(A4) if orientation == "h" else portrait(A4)
    page_w_pt, page_h_pt = pagesize

    c = canvas.Canvas(output_path, pagesize=pagesize)

    if gen_summary:
        draw_summary_page(c, page_w_pt, page_h_pt, margin_mm, options, press)
        c.showPage()

    colors = item_colors(items)
    for run in chosen.runs:
        draw_run_page(c, page_w_pt, page_h_pt, margin_mm, chosen, run,
                      dieline, items, press, colors, empty_color)
        c.showPage()

    c.save()
