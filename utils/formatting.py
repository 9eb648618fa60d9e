"""Human-readable size and ratio strings."""


def format_kib(num_bytes: int) -> str:
    return f"{num_bytes / 1024:.2f}"


def format_compression_ratio(original_size: int, compressed_size: int) -> str:
    return f"{original_size / max(compressed_size, 1):.2f}"


def format_size_percentage(size: int, original_size: int) -> str:
    return f"{size / original_size * 100:.1f}"


def format_size_per_component(data_size: int, num_components: int) -> str:
    """KiB per retained component."""
    return f"{data_size / num_components / 1024:.2f}"


def pluralize(count: int, singular: str = "", plural: str = "s") -> str:
    return singular if count == 1 else plural
