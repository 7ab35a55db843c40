# labelgang ver1.0 - main entry
# - Dieline, press constants and weights come from config.properties
# - Clean error reporting (no traceback)
# - PDF run sheet written only when an output path is given

import argparse
import sys

from io_utils import (
    parse_dieline, parse_items, parse_pdf_margin, parse_press_config, parse_properties,
    parse_qty_per_roll, parse_weights
)
from optimizer import format_layout_summary, generate_layout_options
from pdf_export import generate_pdf
from rolls import plan_roll_splits
from timing import estimate_production_time
from validation import validate_layout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="labelgang 1.0 production-run layout optimizer")
    parser.add_argument("items_csv", help="items.csv input (id,name,quantity)")
    parser.add_argument("config_properties", help="config.properties input (dieline + press)")
    parser.add_argument("output_pdf", nargs="?", help="optional run sheet PDF path")
    parser.add_argument("--option", help="option id to detail (default: best scored)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        # --- LOAD INPUT FILES ---
        items = parse_items(args.items_csv)
        cfg = parse_properties(args.config_properties)
        dieline = parse_dieline(cfg)
        press = parse_press_config(cfg)
        weights = parse_weights(cfg)
        qty_per_roll = parse_qty_per_roll(cfg)
        margin_mm = parse_pdf_margin(cfg)

        # --- OPTIMIZE ---
        options = generate_layout_options(items, dieline, weights=weights, press=press)
    except ValueError as ve:
        print("\n[ERROR] Invalid input:")
        print(str(ve).strip())
        print()
        return 1

    if not options:
        print("No items to lay out.")
        return 0

    # --- RANKED OPTIONS ---
    print("Layout options (best first):")
    for rank, o in enumerate(options, start=1):
        minutes = estimate_production_time(o, press)
        print(f"  {rank}. {o.id}: {format_layout_summary(o)}, ~{minutes} min")
        print(f"     {o.reasoning}")

    chosen = options[0]
    if args.option:
        matches = [o for o in options if o.id == args.option]
        if not matches:
            print(f"\n[ERROR] Unknown option id '{args.option}'.")
            return 1
        chosen = matches[0]

    # --- VALIDATION ---
    result = validate_layout(chosen, items)
    print(f"\nChosen: {chosen.id}")
    if result.valid:
        print("Coverage check passed.")
    else:
        print("[WARNING] Coverage check failed:")
        for e in result.errors:
            print(f"  - {e}")

    # --- RUN DETAIL + ROLL SPLITS ---
    names = {it.id: it.name for it in items}
    for run in chosen.runs:
        print(f"\nRun {run.run_number}: {run.meters:.2f} m, {run.frames} frames")
        for a in run.slot_assignments:
            print(f"  slot {a.slot + 1}: {names.get(a.item_id, a.item_id)} x {a.quantity_in_slot:,}")
            if qty_per_roll:
                for split in plan_roll_splits(a.quantity_in_slot, qty_per_roll, press):
                    print(f"    {split.label}")

    # --- PDF OUTPUT ---
    if args.output_pdf:
        generate_pdf(
            output_path=args.output_pdf,
            options=options,
            chosen=chosen,
            dieline=dieline,
            items=items,
            cfg=cfg,
            press=press,
            margin_mm=margin_mm
        )
        print(f"\nSuccess! PDF saved to {args.output_pdf}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
