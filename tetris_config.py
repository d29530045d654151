CONFIG = {
    "CELL_SIZE": 30,
    "BASE_INTERVAL_MS": 300,
    "SPEED_FACTOR": 1.2,
    "MIN_INTERVAL_MS": 16,
    "SEED": None,
    "HIDDEN_CONTROLS": True,
    "RESERVED_KEYS": "FRPM",
}


def tick_interval_ms(level: int) -> float:
    """Milliseconds between engine ticks; shrinks as the level rises."""
    interval = CONFIG["BASE_INTERVAL_MS"] / (max(level, 1) * CONFIG["SPEED_FACTOR"])
    return max(CONFIG["MIN_INTERVAL_MS"], interval)
