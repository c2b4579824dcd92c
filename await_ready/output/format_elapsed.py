def format_elapsed(elapsed: int) -> str:
    if elapsed < 1000:
        return f"{elapsed}ms"

    return f"{elapsed / 1000:.1f}s"
