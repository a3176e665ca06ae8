# metrics_tracker.py - in-memory latency counters

from collections import defaultdict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if not self.n.get(key): return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        return {k: {"count": self.n[k], "avg_ms": round(self.avg(k) * 1000, 3)} for k in self.n}

    def reset(self):
        self.m.clear()
        self.n.clear()
