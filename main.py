"""Pipeline orchestrator – runs aggregate → report end-to-end.

Usage: python main.py INPUT OUTPUT [LIMIT]
"""

from __future__ import annotations

import logging
import sys

import aggregate as aggregate_module
import report as report_module

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = sys.argv[1:] if argv is None else argv

    if len(args) < 1:
        print("\nNo input file specified. Exiting application......")
        return 1
    if len(args) < 2:
        print("\nNo output file specified. Exiting application.....")
        return 1
    input_path, output_path = args[0], args[1]

    try:
        aggregate_module.check_input_file(input_path)
    except FileNotFoundError:
        print("\nThe input file does not exist. Exiting application.....")
        return 1

    logger.info("=== pipeline start  input=%s ===", input_path)

    try:
        limit = aggregate_module.parse_limit(args[2] if len(args) > 2 else None)

        # -----------------------------------------------------------------------
        # Step 1 – aggregate
        # -----------------------------------------------------------------------
        records = aggregate_module.run_aggregate(input_path, output_path, limit=limit)
        logger.info("aggregate: %d states written to %s", len(records), output_path)

        # -----------------------------------------------------------------------
        # Step 2 – report
        # -----------------------------------------------------------------------
        report_module.run_report(output_path)
    except Exception as e:
        logger.error("=== pipeline ABORTED: %s ===", e)
        return 1

    logger.info("=== pipeline complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
