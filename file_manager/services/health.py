from __future__ import annotations

import psutil


def _size_to_gb(raw_size: int) -> float:
    return round(raw_size / (1024 ** 3), 1)


def base_path_usage(path: str) -> dict | None:
    try:
        usage = psutil.disk_usage(path)
    except OSError:
        return None

    return {
        'total_gb': _size_to_gb(usage.total),
        'used_gb': _size_to_gb(usage.used),
        'free_gb': _size_to_gb(usage.free),
        'percent': usage.percent,
    }
