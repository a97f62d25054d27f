"""Convert a JSON navigation graph into a compressed numpy archive."""
from __future__ import annotations

import argparse
from pathlib import Path

from sea_router.graph.loader import load_records, save_graph_npz


def _is_triple(record: object, id_columns: int) -> bool:
    return (
        isinstance(record, list)
        and len(record) == 3
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in record)
        and all(float(v).is_integer() for v in record[:id_columns])
    )


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--graph", type=Path, required=True, help="graph JSON with 'nodes' and 'edges'")
    parser.add_argument("--out", type=Path, default=Path("data/processed/graph/graph.npz"))
    args = parser.parse_args()

    nodes, edges = load_records(args.graph)
    # The archive is a dense float array, so drop records that are not 3 numbers with integral ids
    nodes = [n for n in nodes if _is_triple(n, 1)]
    edges = [e for e in edges if _is_triple(e, 2)]
    args.out.parent.mkdir(parents=True, exist_ok=True)
    save_graph_npz(args.out, nodes, edges)
    print(f"Wrote {len(nodes)} nodes and {len(edges)} edges to {args.out}")


if __name__ == "__main__":
    main()
