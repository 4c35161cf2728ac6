#!/usr/bin/env python3
"""
Quick Start Guide for XML Resource.

Walks through loading a document, listing its tag spans, locating an element
and editing around it, then saving the result.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_resource import TagCursor, XMLBuffer, add, erase, find

SAMPLE = """<?xml version="1.0"?>
<menu>
  <list title="drinks">
    <li>Tea</li>
    <li>Coffee</li>
    <separator/>
  </list>
</menu>
"""


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - XML Resource")
    print("=" * 30)

    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "tree.xml"
        source.write_text(SAMPLE, encoding="utf-8")

        # Step 1: load
        buffer = XMLBuffer()
        result = buffer.load(source)
        if not result:
            print(f"Load failed: {result.message}")
            return 1
        print(f"\nStep 1: loaded {result.characters} characters")

        # Step 2: walk spans forward, then step back once
        print("\nStep 2: tag spans")
        cursor = TagCursor(buffer)
        for span in cursor:
            print(f"  {span}")
        print(f"  previous() from the end -> {cursor.previous()} at offset {cursor.position}")

        # Step 3: locate. '<li' also matches '<list ...>'
        found = find("li", buffer)
        print(f"\nStep 3: find('li') -> {found.current_span}")
        found = find("li>", buffer)
        print(f"        find('li>') -> {found.current_span}")

        # Step 4: edit around the anchor
        if found.current_span:
            add("<li>Water</li>\n    ", found)
            erase(find("separator", buffer))
        print(f"\nStep 4: found cursor stale after edits: {found.is_stale}")

        # Step 5: save
        target = Path(tmpdir) / "new_tree.xml"
        buffer.save(target).raise_for_error()
        print("\nStep 5: saved document\n")
        print(target.read_text(encoding="utf-8"))

    return 0


if __name__ == "__main__":
    sys.exit(quick_start_example())
