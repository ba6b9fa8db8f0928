
CONFIG = {
    "ROWS": 20,
    "COLS": 10,
    "CELL_SIZE": 32,
    "FPS": 60,
    "SEED": None,
    "BASE_DROP_MS": 1000,
    "MIN_DROP_MS": 50,
    "DROP_STEP_MS": 100,
    "LINES_PER_LEVEL": 5,
    "LINE_SCORE": 100,
}


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


def drop_interval_ms(level: int) -> int:
    """Gravity period for a level; 1000ms at level 1, 100ms faster per level."""
    step = CONFIG["DROP_STEP_MS"]
    return max(CONFIG["MIN_DROP_MS"], CONFIG["BASE_DROP_MS"] - (level - 1) * step)
