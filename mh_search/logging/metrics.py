import csv
import json
import math


class Metrics:
    """Progress sink handed to the search controllers.

    Rows are ``(iter, curr_score, best_score, temp, strategy, status)``.
    ``echo`` optionally receives the start/finish status lines (``print``
    works).
    """

    def __init__(self, echo=None):
        self.rows = []
        self.echo = echo
        self.final_score = None

    def _emit(self, text):
        if self.echo is not None:
            self.echo(text)

    def start(self, strategy):
        self._emit(f"Starting {strategy} ...")

    def finish(self, score):
        self.final_score = float(score)
        self._emit(f"Final value = {score}")

    def append(self, it, curr, best, temp=math.nan, strategy="-", status=""):
        self.rows.append(
            (
                int(it),
                float(curr),
                float(best),
                float(temp),
                strategy,
                status,
            )
        )

    def best_trace(self):
        return [row[2] for row in self.rows]

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["iter", "curr_score", "best_score", "temp", "strategy", "status"])
            for row in self.rows:
                w.writerow(list(row))


def save_metrics_json(path, metrics, best, params, *, extra=None):
    data = {
        "final_best_score": float(best.score),
        "iters_logged": len(metrics.rows),
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)


def save_solution_csv(path, encoding):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["pos", "value"])
        for i, value in enumerate(_flatten(encoding)):
            w.writerow([i, value])


def _flatten(encoding):
    if hasattr(encoding, "tolist"):
        encoding = encoding.tolist()
    if isinstance(encoding, (list, tuple)):
        return list(encoding)
    return [encoding]
