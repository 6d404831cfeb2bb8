import logging
import os

from avlstore import AVLTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

# (description, operation, keys), applied in order to one tree
STEPS = [
    ("Insert elements 3, 4, 5, 6", "insert", (3, 4, 5, 6)),
    ("Delete leaf node 6", "delete", (6,)),
    ("Delete node 4, which has two children", "delete", (4,)),
    ("Insert nodes 2, 1 (triggers a Left-Left rotation)", "insert", (2, 1)),
    ("Insert nodes 7, 8 (triggers a Right-Right rotation)", "insert", (7, 8)),
    ("Delete node with two children (3)", "delete", (3,)),
    ("Insert nodes 10, 20, 30, 25", "insert", (10, 20, 30, 25)),
]


def run(tree: AVLTree | None = None) -> list[tuple[str, str]]:
    """Apply STEPS to tree and return (description, serialization) per step."""
    if tree is None:
        tree = AVLTree()

    results = []
    for description, operation, keys in STEPS:
        apply = tree.insert if operation == "insert" else tree.delete
        for key in keys:
            apply(key)
        tree.validate()
        logger.debug(f"{description}: {tree!r}")
        results.append((description, tree.serialize()))
    return results


def main() -> None:
    for number, (description, serialized) in enumerate(run(), start=1):
        print(f"Test {number}: {description}")
        print(f"Serialized tree: {serialized}")
        print()


if __name__ == "__main__":
    main()
