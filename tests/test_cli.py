import os, sys, csv
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import matplotlib
matplotlib.use("Agg")

from cli import run_bench, run_search

def _write(tmp_path, name, rows):
    p = os.path.join(str(tmp_path), name)
    with open(p, "w") as f:
        f.write("\n".join(rows) + "\n")
    return p

def test_search_prints_path(tmp_path, capsys):
    p = _write(tmp_path, "line.txt", ["+ O"])
    code = run_search.main(["--maze", p, "--moves", "1:0,-1:0", "--ascii"])
    out = capsys.readouterr().out
    assert code == 0
    assert "(0,0) -> (1,0) -> (2,0)" in out
    assert "+.O" in out

def test_search_no_path_exit_code(tmp_path, capsys):
    p = _write(tmp_path, "wall.txt", ["+*O"])
    assert run_search.main(["--maze", p, "--moves", "1:0,-1:0"]) == 1
    assert "No path" in capsys.readouterr().out

def test_search_bad_input_exit_code(tmp_path, capsys):
    p = _write(tmp_path, "bad.txt", ["+  ", "O"])
    assert run_search.main(["--maze", p]) == 2
    assert run_search.main(["--moves", "1:x"]) == 2
    assert "[ERR]" in capsys.readouterr().err

def test_search_default_maze_with_png(tmp_path, capsys):
    png = os.path.join(str(tmp_path), "default.png")
    code = run_search.main(["--png", png, "--planner", "fifo_bfs"])
    assert code in (0, 1)
    assert os.path.isfile(png)
    assert "Maze 20x20" in capsys.readouterr().out

def test_bench_writes_csv(tmp_path, capsys):
    outdir = os.path.join(str(tmp_path), "csv")
    code = run_bench.main(["--sizes", "8x6", "--densities", "0.1,20%", "--num-envs", "2",
                           "--outdir", outdir, "--seed", "3"])
    assert code == 0
    files = [f for f in os.listdir(outdir) if f.endswith(".csv")]
    assert len(files) == 1
    with open(os.path.join(outdir, files[0])) as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 * 2  # densities x envs x planners
    assert {r["planner"] for r in rows} == {"jump_bfs", "fifo_bfs"}
    assert all(r["agree"] == "1" for r in rows)
    assert "[OK] Wrote:" in capsys.readouterr().out

def test_bench_parsers():
    assert run_bench._parse_sizes("20x10, 8x8") == [(20, 10), (8, 8)]
    assert run_bench._parse_densities("0.1,25%") == [0.1, 0.25]
