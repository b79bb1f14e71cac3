#!/usr/bin/env python3
"""
Basic Usage Example - collkit collection helpers

This script calls the helpers directly on the bundled sample packages. It
shows how to:
- Mutate records in place with for_each
- Select records with filter_items
- Project records with map_items and pluck
- Fold a collection with reduce_items, with and without an accumulator

Run: python examples/basic_usage.py
"""

from pprint import pprint
from typing import Any, Dict

from collkit import filter_items, for_each, map_items, pluck, reduce_items
from collkit.data import get_sample_data
from collkit.logging import configure_logging


def count_keywords(acc: Dict[str, Any], item: Dict[str, Any]) -> Dict[str, Any]:
    """Add a record's name and keyword count to the summary."""
    acc["names"].append(item["name"])
    if item.get("keywords") is not None:
        acc["keywordCount"][item["name"]] = len(item["keywords"])
    return acc


def main() -> None:
    configure_logging(level="DEBUG")
    packages = get_sample_data()

    print("🔠 Upper-casing names in place")
    for_each(packages, lambda item: item.update(name=item["name"].upper()))
    pprint(map_items(packages, lambda item: item["name"]))

    print("\n📄 MIT licensed")
    pprint(pluck(filter_items(packages, lambda item: item["license"] == "MIT"), ["name", "license"]))

    print("\n👤 First package, name and author")
    pprint(pluck(packages[0], ["name", "author"]))

    print("\n➕ Sum without accumulator (index 0 is folded twice)")
    print(reduce_items([1, 2, 3, 4], lambda acc, item: acc + item))
    print(reduce_items([1, 2, 3, 4], lambda acc, item: acc + item, reprocess_first=False))

    print("\n📊 Project summary")
    pprint(reduce_items(packages, count_keywords, {"names": [], "keywordCount": {}}), sort_dicts=False)


if __name__ == "__main__":
    main()
