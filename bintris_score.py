"""Best score persistence (a single integer in a small JSON file)"""
import json
import logging
import os

log = logging.getLogger(__name__)

class BestScore:
    def __init__(self, path: str):
        self.path = path
        self.value = self.load()

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                best = int(json.load(f)["best"])
        except (OSError, ValueError, KeyError, TypeError, OverflowError):
            log.warning("ignoring unreadable best score file %s", self.path)
            return 0
        return max(0, best)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"best": self.value}, f)

    def submit(self, score: int) -> bool:
        """Record `score` if it beats the stored best; returns True if it did."""
        if score <= self.value:
            return False
        self.value = score
        log.info("new best score %d", score)
        try:
            self.save()
        except OSError:
            log.exception("could not write best score to %s", self.path)
        return True
