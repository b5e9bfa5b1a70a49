"""
Chained Hash Map Demo -- Sample session, load factor over time, and a
comparison of bucket occupancy under the two bundled hash functions.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from hash_map import HashMap, default_hash, multiplication_hash, MAX_LOAD_FACTOR

SEED = 42
N_KEYS = 3000
BUCKET_COUNTS = [16, 61, 64, 256]

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def random_keys(n, seed=SEED):
    rng = np.random.default_rng(seed)
    alphabet = np.array(list("abcdefghijklmnopqrstuvwxyz0123456789"))
    lengths = rng.integers(3, 12, size=n)
    keys = []
    seen = set()
    for length in lengths:
        key = "".join(rng.choice(alphabet, size=length))
        while key in seen:
            key += str(rng.integers(10))
        seen.add(key)
        keys.append(key)
    return keys


# ---------------------------------------------------------------------------
# Example 1: Sample Session
# ---------------------------------------------------------------------------
def example_1_sample_session():
    """Replay a short session of sets, updates, lookups and removals."""
    print("=" * 60)
    print("Example 1: Sample Session")
    print("=" * 60)

    table = HashMap()
    table.set("Hello", 16)
    table.set("Hello", 17)
    table.set("Hello", "HAHA")
    table.set("bruha", "HAHA")
    table.set("Place", "DisneyLand")
    table.set("Movie", "Pirates Of The Carribean")
    table.set("Food0", "Pizza")
    table.set("Symbol Table", "In Compilers")
    table.set("Food1", "Burger")
    table.set("Food2", "Burger")
    table.set("Instrument", "Guitar")
    table.set("Can I store an array0?", ["Yes", "You", "Can"])
    table.set("Can I store an array1?", ["Yes", "You", "Can"])

    table.print_buckets()
    print(f"\n  keys:   {table.keys()}")
    print(f"  values: {table.values()}")

    print(f"\n  has('Instrument'): {table.has('Instrument')}")
    table.remove("Instrument")
    print(f"  has('Instrument') after remove: {table.has('Instrument')}")
    print(f"  get('Place'): {table.get('Place')}")

    before = table.bucket_count
    table.set("Instrument2", "Drums")
    print(f"\n  length: {table.length()}, buckets: {before} -> {table.bucket_count}")
    table.print_buckets()
    return table


# ---------------------------------------------------------------------------
# Example 2: Load Factor Over Time
# ---------------------------------------------------------------------------
def example_2_load_factor_trace():
    """Record load factor and bucket count after every insert."""
    print("\n" + "=" * 60)
    print("Example 2: Load Factor Over Time")
    print("=" * 60)

    keys = random_keys(N_KEYS)
    traces = {}
    for name, hash_fn in (("default", default_hash), ("multiplication", multiplication_hash)):
        table = HashMap(hash_fn)
        load = np.zeros(N_KEYS)
        buckets = np.zeros(N_KEYS, dtype=int)
        for i, key in enumerate(keys):
            table.set(key, i)
            load[i] = table.load_factor()
            buckets[i] = table.bucket_count
        traces[name] = (load, buckets)

        resizes = np.flatnonzero(np.diff(buckets)) + 1
        print(f"\n  {name} hash: {len(resizes)} resizes, final buckets {buckets[-1]}")
        print(f"    resize at inserts: {(resizes + 1).tolist()}")
        print(f"    max load factor seen: {load.max():.4f}")

    load, buckets = traces["default"]
    x = np.arange(1, N_KEYS + 1)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(x, load, color=COLORS["blue"], linewidth=1.2)
    axes[0].axhline(MAX_LOAD_FACTOR, color=COLORS["red"], linestyle="--",
                    label=f"threshold {MAX_LOAD_FACTOR}")
    axes[0].set_xlabel("Entries inserted")
    axes[0].set_ylabel("Load factor")
    axes[0].set_title("Load factor after each insert\nDrops by half on every resize",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].step(x, buckets, where="post", color=COLORS["green"])
    axes[1].set_yscale("log", base=2)
    axes[1].set_xlabel("Entries inserted")
    axes[1].set_ylabel("Bucket count")
    axes[1].set_title("Bucket count doubles at the threshold",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_load_factor.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    return traces


# ---------------------------------------------------------------------------
# Example 3: Chain Length Distribution
# ---------------------------------------------------------------------------
def chain_lengths(hash_fn, keys, bucket_count):
    # Disable growth so every table keeps bucket_count buckets.
    table = HashMap(hash_fn, bucket_count=bucket_count, max_load_factor=float("inf"))
    for key in keys:
        table.set(key, None)
    return np.array(table.bucket_sizes())


def example_3_chain_lengths():
    """Compare bucket occupancy of the two hash functions."""
    print("\n" + "=" * 60)
    print("Example 3: Chain Length Distribution")
    print("=" * 60)

    keys = random_keys(N_KEYS // 3, seed=SEED + 1)
    stats = []

    fig, axes = plt.subplots(2, len(BUCKET_COUNTS), figsize=(18, 8))
    for col, bucket_count in enumerate(BUCKET_COUNTS):
        for row, (name, hash_fn, color) in enumerate((
            ("default", default_hash, COLORS["blue"]),
            ("multiplication", multiplication_hash, COLORS["orange"]),
        )):
            lengths = chain_lengths(hash_fn, keys, bucket_count)
            empty = int(np.sum(lengths == 0))
            stats.append((name, bucket_count, lengths.mean(), lengths.std(), lengths.max(), empty))
            print(f"  {name:>14} m={bucket_count:<4} mean={lengths.mean():7.2f} "
                  f"std={lengths.std():7.2f} max={lengths.max():4d} empty={empty}")

            ax = axes[row, col]
            ax.bar(np.arange(bucket_count), lengths, width=1.0, color=color)
            ax.axhline(lengths.mean(), color=COLORS["dark"], linestyle="--", linewidth=1)
            ax.set_title(f"{name}, m={bucket_count}", fontsize=10, fontweight="bold")
            ax.set_xlabel("Bucket index")
            ax.set_ylabel("Chain length")
            ax.grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_chain_lengths.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    return stats


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report(stats):
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.92, "Chained Hash Map", fontsize=24, fontweight="bold",
                ha="center", transform=ax.transAxes)
        lines = [f"{'hash':>14}  {'m':>4}  {'mean':>7}  {'std':>7}  {'max':>4}  {'empty':>5}"]
        for name, bucket_count, mean, std, longest, empty in stats:
            lines.append(f"{name:>14}  {bucket_count:>4}  {mean:7.2f}  {std:7.2f}  "
                         f"{longest:>4}  {empty:>5}")
        ax.text(0.08, 0.8, "\n".join(lines), fontsize=10, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.3)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_load_factor.png": "Example 2: Load Factor Over Time",
            "02_chain_lengths.png": "Example 3: Chain Length Distribution",
        }
        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Chained Hash Map Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Keys: {N_KEYS}, bucket counts: {BUCKET_COUNTS}")
    print()

    example_1_sample_session()
    example_2_load_factor_trace()
    stats = example_3_chain_lengths()
    generate_pdf_report(stats)

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
