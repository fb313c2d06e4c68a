import sys, os
import pandas as pd
import matplotlib.pyplot as plt

def main(p):
    df = pd.read_csv(p)
    df["size"] = df["W"].astype(str) + "x" + df["H"].astype(str)
    ok = df[df["success"] == 1]

    agg = df.groupby(["size", "density"]).agg(
        success_rate=("success", "mean"),
        mean_levels=("levels", "mean"),
    ).reset_index()
    print("\nAggregate:\n", agg)

    # Plot 1: success rate vs density, one line per size
    plt.figure(figsize=(7,4))
    for size, g in agg.groupby("size"):
        plt.plot(g["density"], g["success_rate"], marker="o", label=size)
    plt.title("Goal reachable vs wall density")
    plt.xlabel("Wall density")
    plt.ylabel("Success rate")
    plt.legend()
    plt.tight_layout()
    out1 = os.path.join(os.path.dirname(p), "bench_success_rate.png")
    plt.savefig(out1, bbox_inches="tight"); plt.close()
    print("Saved:", out1)

    # Plot 2: mean hops by planner and size (successful runs only)
    h = ok.groupby(["planner", "size"])["hops"].agg(["mean","std"]).reset_index()
    labels = h["planner"] + " " + h["size"]
    plt.figure(figsize=(7,4))
    plt.bar(labels, h["mean"], yerr=h["std"])
    plt.title("Average path hops (successful runs)")
    plt.xlabel("Planner / size")
    plt.ylabel("Hops")
    plt.xticks(rotation=15)
    plt.tight_layout()
    out2 = os.path.join(os.path.dirname(p), "bench_hops_bar.png")
    plt.savefig(out2, bbox_inches="tight"); plt.close()
    print("Saved:", out2)

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tools/plot_bench.py <path/to/bench.csv>")
        sys.exit(1)
    main(sys.argv[1])
