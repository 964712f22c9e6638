# data/repository.py
import json
import logging
from pathlib import Path
from numbers import Integral

from services.delivery_service import DEFAULT_DELIVERY_FEES
from services.tax_service import DEFAULT_TAX_RATES

logger = logging.getLogger("pricing.config")


def _non_negative_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value >= 0


class PricingConfigRepository:
    """
    Read-only access to the pricing tables in pricing.json.

    Example file:
        {
          "tax_rates": {"hot": 80, "frozen": 0},
          "delivery_fees": {
            "local": {"standard": 299, "rush": 599},
            "outer": {"standard": 499, "rush": 899}
          }
        }
    """

    def __init__(self, storage_dir="data/storage", filename: str = "pricing.json"):
        # base folder where the pricing file lives
        self.storage_dir = Path(storage_dir)
        self.filename = filename

    def _file_path(self) -> Path:
        return self.storage_dir / self.filename

    def _read_json(self) -> dict:
        # Load the config from disk. A missing, empty, unreadable or
        # undecodable file (bad JSON, oversized numbers, runaway nesting)
        # gives {} so every table falls back to its defaults.
        path = self._file_path()
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return {}
                data = json.loads(text)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Config: cannot read {path}, using defaults ({e})")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Config: {path} is not a JSON object, using defaults")
            return {}
        return data

    def get_tax_rates(self) -> dict[str, int]:
        # Returns {kind: per_mille, ...}: configured rates over the defaults.
        rates = dict(DEFAULT_TAX_RATES.rates)
        data = self._read_json().get("tax_rates")
        if not isinstance(data, dict):
            return rates

        for kind, rate in data.items():
            if _non_negative_int(rate):
                rates[kind] = int(rate)
            else:
                logger.warning(f"Config: ignoring tax rate {kind}={rate!r}, keeping default")
        return rates

    def get_delivery_fees(self) -> dict[str, dict[str, int]]:
        # Returns {zone: {"standard": cents, "rush": cents}, ...}.
        # Configured fees override the defaults one zone and one fee at a time.
        fees = {zone: dict(row) for zone, row in DEFAULT_DELIVERY_FEES.fees.items()}
        data = self._read_json().get("delivery_fees")
        if not isinstance(data, dict):
            return fees

        for zone, row in data.items():
            if not isinstance(row, dict):
                logger.warning(f"Config: ignoring delivery fees for zone {zone!r}")
                continue
            merged = dict(fees.get(zone, {}))
            for key in ("standard", "rush"):
                if _non_negative_int(row.get(key)):
                    merged[key] = int(row[key])
                elif key in row:
                    logger.warning(f"Config: ignoring {key} fee for zone {zone!r}")
            if "standard" in merged and "rush" in merged:
                fees[zone] = merged
            else:
                logger.warning(f"Config: ignoring delivery fees for zone {zone!r}")
        return fees
