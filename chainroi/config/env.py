from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Tuple

SUPPORTED_CURRENCIES: Tuple[str, ...] = ("NOK", "EUR", "USD", "ZAR")


class ConfigError(RuntimeError):
    """Invalid server-side setting; not the client's fault."""


@dataclass(frozen=True)
class ApiConfig:
    api_key: str | None = None
    rate_limit_n: int = 5
    rate_limit_window_sec: float = 1.0


def get_api_config() -> ApiConfig:
    return ApiConfig(
        api_key=os.getenv("API_KEY") or None,
        rate_limit_n=int(os.getenv("RATE_LIMIT_N", "5")),
        rate_limit_window_sec=float(os.getenv("RATE_LIMIT_WINDOW_SEC", "1.0")),
    )


@dataclass(frozen=True)
class ReportConfig:
    currency: str = "NOK"  # label only, amounts are never converted


def get_report_config() -> ReportConfig:
    cur = os.getenv("CHAINROI_CURRENCY", "NOK").upper()
    if cur not in SUPPORTED_CURRENCIES:
        raise ConfigError(f"CHAINROI_CURRENCY: unsupported currency: {cur}")
    return ReportConfig(currency=cur)
