import numpy as np

class Metrics:
    def __init__(self):
        self.data = {
            "runtime_ms": [],
            "baseline_runtime_ms": [],
            "path_cost": [],
            "hops": [],
            "found": []
        }

    def log(self, runtime_ms, baseline_runtime_ms, path_cost, hops, found):
        self.data["runtime_ms"].append(runtime_ms)
        self.data["baseline_runtime_ms"].append(baseline_runtime_ms)
        self.data["path_cost"].append(path_cost)
        self.data["hops"].append(hops)
        self.data["found"].append(1.0 if found else 0.0)

    def summary(self):
        """Mean of every series; path cost and hops only over found paths."""
        found = np.asarray(self.data["found"], dtype=bool)
        out = {}
        for k, v in self.data.items():
            values = np.asarray(v, dtype=float)
            if k in ("path_cost", "hops"):
                values = values[found] if values.size else values
            out[k] = float(np.mean(values)) if values.size else 0.0
        return out
