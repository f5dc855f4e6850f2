#!/usr/bin/env python3
"""replace_backgrounds

Purpose:
- Overwrite every background image (.jpg/.jpeg/.png) found directly inside
  the immediate subfolders of a target folder with one chosen image.

- Standalone CLI utility

Inputs (CLI):
- source_image: Image whose bytes are copied over every candidate.
- target_root: Folder whose immediate subfolders hold the images to replace.
- --config: Optional YAML config (paths, logging, replace sections).
- --dry-run: List candidates without writing anything.
- --preserve-metadata: Copy timestamps/mode bits as well (shutil.copy2).
- --log-level: Logging level (DEBUG/INFO/WARNING/ERROR).

Outputs/Side effects:
- Overwrites candidate files in place; file names and locations do not change.
- Logs "Progress: <N>%" after each replaced file and a final summary.
- Exit status: 0 on success, 2 on invalid inputs, 1 when discovery or a copy
  fails (files replaced before the failure stay replaced).

Notes/Assumptions:
- Files directly inside target_root are never touched.
- Traversal is one level deep; nested subfolders are ignored.

Usage:
    python -m media.replace_backgrounds /path/to/background.jpg /path/to/Songs
"""
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from background_replacement.entrypoints.replace_backgrounds import build_use_case
from common.cli import add_config_arg, add_log_level_arg, parse_args_with_config, setup_logging
from common.logging import attach_counting_handler
from exceptions.exceptions import CopyFailed, PreconditionFailed, ReplacementError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replace background images in every subfolder with one image.")
    add_config_arg(parser); add_log_level_arg(parser)
    parser.add_argument("source_image", nargs="?", help="Image to copy over every candidate")
    parser.add_argument("target_root", nargs="?", help="Folder whose subfolders contain the images to replace")
    parser.add_argument("--dry-run", action="store_true", help="Only list the files that would be replaced")
    parser.add_argument("--preserve-metadata", action="store_true", default=None,
                        help="Also copy timestamps and permission bits from the source image")
    return parser


def _log_progress(percent: int) -> None:
    logging.info("Progress: %d%%", percent)


def main(argv: Optional[List[str]] = None) -> int:
    def _defaults_from_cfg(cfg):
        return dict(
            source_image=cfg.paths.source_image or None,
            target_root=cfg.paths.target_root or None,
            log_level=cfg.logging.level,
            preserve_metadata=cfg.replace.preserve_metadata,
        )

    args, cfg = parse_args_with_config(build_parser, _defaults_from_cfg, argv)
    setup_logging(args.log_level)

    cfg = replace(cfg, replace=replace(cfg.replace, preserve_metadata=bool(args.preserve_metadata)))
    counter = attach_counting_handler()
    try:
        return _run(build_use_case(config=cfg), args, counter)
    finally:
        logging.getLogger().removeHandler(counter)


def _run(use_case, args: argparse.Namespace, counter) -> int:
    try:
        if args.dry_run:
            candidates = use_case.list_candidates(source_image=args.source_image, target_root=args.target_root)
            for path in candidates:
                logging.info("Would replace: %s", path)
            logging.info("Dry run: %d image(s) would be replaced.", len(candidates))
            return 0

        replaced = use_case.run(source_image=args.source_image, target_root=args.target_root,
                                on_progress=_log_progress)
    except PreconditionFailed as exc:
        logging.error("❌ Invalid input: %s", exc)
        return 2
    except CopyFailed as exc:
        logging.error("❌ %s", exc)
        logging.error("Replaced %d image(s) before the failure.", len(exc.replaced))
        return 1
    except ReplacementError as exc:
        logging.error("❌ %s", exc)
        logging.error("Replaced 0 image(s) before the failure.")
        return 1

    logging.info("✅ Replaced %d image(s). Warnings: %d. Errors: %d.",
                 len(replaced), counter.warnings, counter.errors)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
