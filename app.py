# app.py
"""
Person Grouping Engine
----------------------
Usage example:
 python app.py examples/people.csv same_email_or_phone --out out/
"""
import argparse
import logging
import sys

from matching.schema import MATCHING_TYPES
from matching.errors import InvalidDataFormat
from matching.pipeline import process_file

def build_parser():
   parser = argparse.ArgumentParser(
       description="Assign a shared person_id to CSV rows with the same email and/or phone",
       epilog=f"MATCHING TYPES: {', '.join(MATCHING_TYPES.values())}",
   )
   parser.add_argument("input_file", type=str, help="Path to people CSV (header row required)")
   parser.add_argument("matching_type", type=str, help="One of: " + ", ".join(MATCHING_TYPES.values()))
   parser.add_argument("--out", type=str, required=False, help="Output directory (default: next to the input)")
   parser.add_argument("--audit", action="store_true", help="Warn about person_ids linked by shared keys but not merged")
   parser.add_argument("--log-level", type=str, default="INFO", help="DEBUG, INFO, WARNING, ERROR")
   return parser

def main(argv=None):
   args = build_parser().parse_args(argv)
   logging.basicConfig(
       level=getattr(logging, args.log_level.upper(), logging.INFO),
       format="%(levelname)s: %(message)s",
   )
# ---- Group ----
   try:
       out_path = process_file(args.input_file, args.matching_type, outdir=args.out, audit=args.audit)
   except InvalidDataFormat as e:
       print(f"ERROR: Invalid data format - {e}", file=sys.stderr)
       return 1
   except (OSError, UnicodeDecodeError) as e:
       print(f"ERROR: {e}", file=sys.stderr)
       return 1
   print(f"✅ Done. Output written to {out_path}.")
   return 0

if __name__ == "__main__":
   sys.exit(main())
