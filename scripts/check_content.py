#!/usr/bin/env python3
"""
check_content.py - Validate bundled curriculum content before shipping.

Loads lessons, learning path and quiz bank exactly as the app does, then
runs content-quality checks and prints per-level statistics.

Usage:
  python scripts/check_content.py
  python scripts/check_content.py --content-dir path/to/content --stats-output stats.json
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from lingopath.classroom import CatalogError, CurriculumQuery, build_query
from lingopath.config import LOG_FORMAT, get_content_dir

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Quality Checks
# -----------------------------------------------------------------------------

def run_quality_checks(query: CurriculumQuery) -> list[str]:
    """Checks that do not block loading but indicate authoring mistakes."""
    issues = []

    for lesson in query.get_all_lessons():
        if lesson.is_checkpoint:
            continue
        if not lesson.vocabulary:
            issues.append(f"Lesson {lesson.id} ({lesson.topic}) has no vocabulary")
        if not lesson.grammar:
            issues.append(f"Lesson {lesson.id} ({lesson.topic}) has no grammar rules")

        seen = set()
        for vocab in lesson.vocabulary:
            key = vocab.word.casefold()
            if key in seen:
                issues.append(f"Lesson {lesson.id} repeats word: {vocab.word}")
            seen.add(key)

    path_ids = {node.id for node in query.get_path()}
    if path_ids:
        for lesson in query.get_all_lessons():
            if lesson.id not in path_ids:
                issues.append(f"Lesson {lesson.id} is not reachable from the learning path")

    for level, count in query.get_level_counts().items():
        if count == 0:
            issues.append(f"Level {level.value} has no lessons")

    return issues


# -----------------------------------------------------------------------------
# Statistics
# -----------------------------------------------------------------------------

def compute_stats(query: CurriculumQuery) -> dict:
    lessons = query.get_all_lessons()
    bank = query.get_quiz_bank()
    return {
        "checked_at": datetime.now().isoformat(),
        "total_lessons": len(lessons),
        "checkpoint_lessons": sum(1 for lesson in lessons if lesson.is_checkpoint),
        "total_vocabulary": sum(len(lesson.vocabulary) for lesson in lessons),
        "total_grammar_rules": sum(len(lesson.grammar) for lesson in lessons),
        "lessons_per_level": {level.value: n for level, n in query.get_level_counts().items()},
        "path_nodes": len(query.get_path()),
        "quiz_fill_in": len(bank.fill_in_questions()),
        "quiz_reorder": len(bank.reorder_questions()),
    }


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Validate curriculum content and print statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Content directory (default: LINGOPATH_CONTENT_DIR or the bundled content)"
    )
    parser.add_argument(
        "--stats-output",
        type=Path,
        default=None,
        help="Write statistics JSON to this path"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero if quality checks report issues"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT
    )

    content_dir = args.content_dir or get_content_dir()
    logger.info(f"Checking content in {content_dir}")

    try:
        query = build_query(content_dir)
    except (CatalogError, ValidationError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Content failed to load: {e}")
        sys.exit(1)

    logger.info("Running quality checks...")
    issues = run_quality_checks(query)
    if issues:
        logger.warning(f"Found {len(issues)} quality issues:")
        for issue in issues[:10]:
            logger.warning(f"  - {issue}")
        if len(issues) > 10:
            logger.warning(f"  ... and {len(issues) - 10} more")
    else:
        logger.info("  All quality checks passed!")

    stats = compute_stats(query)
    if args.stats_output:
        with open(args.stats_output, "w", encoding="utf-8") as f:
            json.dump(stats, f, indent=2, ensure_ascii=False)
        logger.info(f"Saved stats to: {args.stats_output}")

    logger.info("=" * 50)
    logger.info(f"Lessons: {stats['total_lessons']} ({stats['checkpoint_lessons']} checkpoints)")
    for level, count in stats["lessons_per_level"].items():
        logger.info(f"  {level}: {count}")
    logger.info(f"Vocabulary items: {stats['total_vocabulary']}")
    logger.info(f"Grammar rules: {stats['total_grammar_rules']}")
    logger.info(f"Path nodes: {stats['path_nodes']}")
    logger.info(f"Quiz questions: {stats['quiz_fill_in']} fill-in, {stats['quiz_reorder']} reorder")

    if issues and args.strict:
        sys.exit(1)


if __name__ == "__main__":
    main()
