import json
import logging
import os

logger = logging.getLogger(__name__)


class JsonStore:
    """String key/value store mirrored into a JSON file on every write."""

    def __init__(self, path):
        self.path = path
        self.data = self.load()

    def load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("%s not found, starting with an empty store", self.path)
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def save(self):
        # The store file is only ever replaced whole
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Could not save %s: %s", self.path, e)

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = str(value)
        self.save()

    def update(self, values):
        self.data.update({k: str(v) for k, v in values.items()})
        self.save()

    def delete(self, key):
        if self.data.pop(key, None) is not None:
            self.save()
