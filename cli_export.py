#!/usr/bin/env python3
"""
CLI runner for the course structuring and export pipeline.

Reads a course record (metadata plus the editor's 'content' tree) from a
JSON file and prints its outline, dumps the course document, or writes the
PDF / Word exports.
"""
import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from course.transformer import load_document_tree, transform
from export.flow_exporter import download_course_doc
from export.pdf_renderer import download_course_pdf
from outline.extractor import extract_outline


def load_course_record(file_path: str):
    """Load a course record from JSON, or None if unreadable."""
    if not os.path.exists(file_path):
        print(f"❌ Error: File not found: {file_path}")
        return None
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            record = json.load(f)
    except ValueError as e:
        print(f"❌ Error: Invalid JSON in {file_path}: {e}")
        return None
    if not isinstance(record, dict):
        print(f"❌ Error: Expected a JSON object in {file_path}")
        return None
    return record


def build_course(record: dict):
    """Return (outline, course document) for a course record."""
    tree = load_document_tree(record.get('content'))
    outline = extract_outline(tree) if tree else []
    return outline, transform(outline, record)


def show_outline_cli(file_path: str):
    """Print the numbered outline of a course."""
    record = load_course_record(file_path)
    if record is None:
        return 1

    outline, _ = build_course(record)
    if not outline:
        print("❌ No outline items found")
        return 1

    print("\nOutline:")
    print("-" * 60)

    def print_item(item, indent=0):
        print("  " * indent + f"├─ [{item.id}] {item.display_title()}")
        for child in item.children:
            print_item(child, indent + 1)

    for item in outline:
        print_item(item, 0)
    return 0


def dump_course_cli(file_path: str, output_path: str = None):
    """Write the course document as JSON."""
    record = load_course_record(file_path)
    if record is None:
        return 1

    _, course = build_course(record)
    data = json.dumps(course.to_dict(), ensure_ascii=False, indent=2)

    if output_path is None:
        print(data)
    else:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(data)
        print(f"✓ Course document written to: {output_path}")
    print(f"  Sections: {len(course.sections)}")
    return 0


def export_cli(file_path: str, fmt: str, orientation: str, output_dir: str):
    """Write the PDF or Word export of a course."""
    print("=" * 60)
    print(f"Exporting: {file_path} ({fmt})")
    print("=" * 60)

    record = load_course_record(file_path)
    if record is None:
        return 1

    _, course = build_course(record)
    if fmt == 'pdf':
        ok = download_course_pdf(course, orientation, output_dir)
    else:
        ok = download_course_doc(course, output_dir)

    if not ok:
        print("❌ Export failed, see log for details")
        return 1

    print(f"✓ Export written to: {output_dir}")
    print(f"  Title: {course.title}")
    print(f"  Sections: {len(course.sections)}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description='Course outline and export CLI'
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    outline_parser = subparsers.add_parser('outline', help='Show numbered outline')
    outline_parser.add_argument('file', type=str, help='Course record JSON file')

    course_parser = subparsers.add_parser('course', help='Dump course document as JSON')
    course_parser.add_argument('file', type=str, help='Course record JSON file')
    course_parser.add_argument('-o', '--output', type=str, help='Output file path')

    pdf_parser = subparsers.add_parser('pdf', help='Export paginated PDF')
    pdf_parser.add_argument('file', type=str, help='Course record JSON file')
    pdf_parser.add_argument('--orientation', type=str, default=settings.default_orientation,
                            choices=['portrait', 'landscape', 'p', 'l'], help='Page orientation')
    pdf_parser.add_argument('-d', '--output-dir', type=str, default=settings.output_dir,
                            help='Output directory')

    doc_parser = subparsers.add_parser('doc', help='Export Word-compatible document')
    doc_parser.add_argument('file', type=str, help='Course record JSON file')
    doc_parser.add_argument('-d', '--output-dir', type=str, default=settings.output_dir,
                            help='Output directory')

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.command == 'outline':
        return show_outline_cli(args.file)
    elif args.command == 'course':
        return dump_course_cli(args.file, args.output)
    elif args.command == 'pdf':
        return export_cli(args.file, 'pdf', args.orientation, args.output_dir)
    elif args.command == 'doc':
        return export_cli(args.file, 'doc', None, args.output_dir)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
