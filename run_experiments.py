#!/usr/bin/env python3
import subprocess, sys

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    run("All modes, default cases", f"{sys.executable} -m tilepuzzle.experiments.compare_modes")
    run("A* only, 15-puzzle", f"{sys.executable} -m tilepuzzle.experiments.compare_modes --case p15_corner --modes 1 2")
    run("Manhattan only, deep 15-puzzle", f"{sys.executable} -m tilepuzzle.experiments.compare_modes --case p15_deep --modes 2")
    run("Manhattan only, 24-puzzle", f"{sys.executable} -m tilepuzzle.experiments.compare_modes --case p24_column --modes 2")

if __name__ == "__main__":
    main()
