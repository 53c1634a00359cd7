"""Command-line family tree viewer - works without web server.

Usage:
    python view_tree_cli.py                    # bundled sample family
    python view_tree_cli.py members.json       # JSON list of member documents
    python view_tree_cli.py members.json 6     # also list relations of member 6
"""

import json
import sys
sys.path.insert(0, ".")

from src.kinship.generations import ordered_generations
from src.kinship.graph import FamilyGraph
from src.kinship.tree import TreeNode
from src.logging_config import setup_logging


def print_tree(node: TreeNode, depth: int = 0):
    label = node.name
    if node.spouse is not None:
        label += f" + {node.spouse.display_name}"
    print(f"{'   ' * depth}{'└─ ' if depth else ''}{label}")
    for child in node.children:
        print_tree(child, depth + 1)


def main(argv: list[str]):
    setup_logging()

    if len(argv) > 1:
        with open(argv[1], encoding="utf-8") as f:
            graph = FamilyGraph.from_records(json.load(f))
    else:
        from seed_data import load_sample_graph
        graph = load_sample_graph()

    print("=" * 80)
    print("🌳 FAMILY TREE - Command Line Viewer")
    print("=" * 80)
    print(f"\n📊 {len(graph)} Members\n")

    print_tree(graph.build_tree(pair_couples=True))

    groups = graph.group_by_generation()
    print(f"\n{'=' * 80}")
    for level in ordered_generations(groups):
        names = ", ".join(m.display_name for m in groups[level])
        print(f"   Generation {level if level is not None else 'Unknown'}: {names}")

    if len(argv) > 2:
        member = graph.get_member(argv[2])
        if member is None:
            print(f"\n❓ Member {argv[2]} not found")
        else:
            print(f"\n{'=' * 80}")
            print(f"👤 Relations of {member.display_name}:")
            for related in graph.relations_for(member.id):
                label = related.relationship.label
                print(f"   • {related.member.display_name}: {label.english} ({label.marathi})")

    print(f"\n{'=' * 80}")
    print("✅ Done!")
    print()


if __name__ == "__main__":
    main(sys.argv)
