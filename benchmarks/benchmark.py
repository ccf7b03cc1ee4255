import random

from pyinstrument import Profiler
from ordset import ArrayOrderedSet, LinkedOrderedSet


def make_values(n, seed=1):
    rng = random.Random(seed)
    values = list(range(n))
    rng.shuffle(values)
    return values


def exercise(cls, values):
    s = cls()
    for v in values:
        s.add(v)
    s.reverse()
    for v in values[::3]:
        s.remove(v)
    s.retain_all(set(values[::2]))
    return s


def benchmark_backings():
    N = 2_000
    values = make_values(N)
    print(f"Inserting {N} shuffled values")

    profiler = Profiler()
    profiler.start()

    for cls in (ArrayOrderedSet, LinkedOrderedSet):
        print(f"Starting {cls.__name__}...")
        s = exercise(cls, values)
        print(f"{cls.__name__} finished with {len(s)} elements")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("ordset_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_backings()
