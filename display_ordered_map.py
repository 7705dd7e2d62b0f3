import logging
import os

import numpy as np
from numpy.random import default_rng

from ordered_map import Tree

logger = logging.getLogger()

N_KEYS = 12
SEED = 2023


def build_random_tree(n_keys: int, seed: int) -> Tree:
    """Insert the keys 1..n_keys in a random order drawn from ``seed``."""
    rng = default_rng(seed)
    keys = rng.permutation(np.arange(1, n_keys + 1))

    tree = Tree()
    for k in keys:
        k = int(k)
        tree.put(k, k)

    return tree


def display_tree(tree: Tree):
    logger.info(
        "size=%d height=%d median=%s", tree.size(), tree.height(), tree.median()
    )
    print(tree.print_keys_in_order())
    print(tree.pretty_print_keys(), end="")


def main(n_keys: int = N_KEYS, seed: int = SEED):
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    tree = build_random_tree(n_keys, seed)
    print("Pre-order keys: {}".format(tree.preorder_keys()))
    display_tree(tree)

    # Remove every third key and show the reshaped tree.
    for k in range(3, n_keys + 1, 3):
        tree.delete(k)

    print("\nAfter deleting multiples of 3:")
    display_tree(tree)


if __name__ == "__main__":
    main()
